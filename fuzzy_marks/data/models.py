"""Roster, match and marks data types"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

NULL_RECORD_ID = 0
FIRST_RECORD_ID = 1


@dataclass(frozen=True)
class RosterEntry:
    """A canonical student name and its opaque identifier."""

    name: str
    student_id: str = ''


@dataclass(frozen=True)
class MatchResult:
    """A roster entry scored against one query."""

    entry: RosterEntry
    score: float
    rank: int

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def student_id(self) -> str:
        return self.entry.student_id

    def to_dict(self) -> Dict:
        return {
            'rank': self.rank,
            'student_id': self.student_id,
            'name': self.name,
            'score': self.score
        }


@dataclass
class MarkRecord:
    """One row of the marks book."""

    entry: RosterEntry
    record_id: int = NULL_RECORD_ID
    marks: List[int] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def student_id(self) -> str:
        return self.entry.student_id

    @property
    def total(self) -> int:
        return sum(self.marks)

    @property
    def is_recorded(self) -> bool:
        return self.record_id != NULL_RECORD_ID

    def to_dict(self) -> Dict:
        return {
            'record_id': self.record_id,
            'student_id': self.student_id,
            'name': self.name,
            'marks': list(self.marks)
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'MarkRecord':
        entry = RosterEntry(name=str(data['name']), student_id=str(data.get('student_id', '')))
        return cls(
            entry=entry,
            record_id=data.get('record_id', NULL_RECORD_ID),
            marks=list(data.get('marks', []))
        )
