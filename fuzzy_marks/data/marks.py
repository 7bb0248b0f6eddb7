"""In-memory marks book: one row per student, reordered by fuzzy query"""
import json
from typing import Dict, Iterable, Iterator, List, Optional
import pandas as pd
from .models import FIRST_RECORD_ID, NULL_RECORD_ID, MarkRecord, RosterEntry
from ..core.scorer import Scorer
from ..utils.config import Config
from ..utils.text import is_blank


class MarksBook:
    def __init__(self, scorer: Optional[Scorer] = None):
        self.scorer = scorer or Scorer()
        self.next_record_id = FIRST_RECORD_ID
        self.records: List[MarkRecord] = []
    
    @classmethod
    def from_roster(cls, roster: Iterable[RosterEntry], scorer: Optional[Scorer] = None) -> 'MarksBook':
        book = cls(scorer)
        for entry in roster:
            book.add_student(entry)
        return book
    
    def __len__(self) -> int:
        return len(self.records)
    
    def __iter__(self) -> Iterator[MarkRecord]:
        return iter(self.records)
    
    def is_empty(self) -> bool:
        return not self.records
    
    def add_student(self, entry: RosterEntry):
        """Add a student with no marks yet"""
        self.records.append(MarkRecord(entry=entry))
    
    def clear(self):
        """Drop every row. Record ids already handed out are not reused."""
        self.records.clear()
    
    def top(self) -> Optional[MarkRecord]:
        return self.records[0] if self.records else None
    
    def sort_with(self, query: str):
        """
        Reorder rows by descending similarity of the student name to query.
        
        Equally scored rows keep their current order, except that an exact
        (normalised) name match goes first. A blank query leaves the book
        untouched.
        """
        if is_blank(query) or not self.records:
            return
        
        ranking = self.scorer.rank(query, [record.name for record in self.records])
        self.records = [self.records[i] for i, _ in ranking]
    
    def set_marks_at_top(self, marks: Iterable[int]) -> MarkRecord:
        """
        Record item marks for the student on the first row.
        
        Args:
            marks: Item marks, non-negative integers
            
        Returns:
            The updated row
            
        Raises:
            ValueError: empty book or invalid marks
        """
        marks = self._validate_marks(marks)
        
        if not self.records:
            raise ValueError("No student record to attach marks to")
        
        record = self.records[0]
        record.marks = marks
        if record.record_id == NULL_RECORD_ID:
            record.record_id = self.next_record_id
            self.next_record_id += 1
        
        print(f"✓ Recorded marks for {record.name} (Record: {record.record_id}, Total: {record.total})")
        return record
    
    @staticmethod
    def _validate_marks(marks: Iterable[int]) -> List[int]:
        validated = []
        for mark in marks:
            if isinstance(mark, bool) or not isinstance(mark, int):
                raise ValueError(f"Marks must be integers, got {mark!r}")
            if mark < 0:
                raise ValueError(f"Marks must not be negative, got {mark}")
            validated.append(mark)
        return validated
    
    def to_json(self) -> str:
        """Serialize the id counter and rows to a JSON string"""
        return json.dumps({
            'next_record_id': self.next_record_id,
            'records': [record.to_dict() for record in self.records]
        })
    
    @classmethod
    def from_json(cls, text: str, scorer: Optional[Scorer] = None) -> 'MarksBook':
        """
        Rebuild a marks book from to_json() output.
        
        Raises:
            ValueError: text is not a serialized marks book
        """
        try:
            data = json.loads(text)
            records = [MarkRecord.from_dict(item) for item in data['records']]
            next_record_id = int(data.get('next_record_id', FIRST_RECORD_ID))
            for record in records:
                record.marks = cls._validate_marks(record.marks)
                if isinstance(record.record_id, bool) or not isinstance(record.record_id, int) \
                        or record.record_id < NULL_RECORD_ID:
                    raise ValueError(f"Invalid record id: {record.record_id!r}")
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise ValueError(f"Failed deserializing marks book: {e}") from e
        
        # Never hand out an id that is already in use
        used = [record.record_id for record in records]
        next_record_id = max([next_record_id, FIRST_RECORD_ID] + [i + 1 for i in used])
        
        book = cls(scorer)
        book.records = records
        book.next_record_id = next_record_id
        return book
    
    def to_frame(self) -> pd.DataFrame:
        """Rows as a DataFrame with one column per item mark"""
        cols = Config.EXPORT_COLS
        item_count = max((len(record.marks) for record in self.records), default=0)
        item_cols = [cols['item'].format(i) for i in range(1, item_count + 1)]
        columns = [cols['record_id'], cols['student_id'], cols['name'], cols['total']] + item_cols
        
        rows = []
        for record in self.records:
            row: Dict = {
                cols['record_id']: record.record_id if record.is_recorded else None,
                cols['student_id']: record.student_id,
                cols['name']: record.name,
                cols['total']: record.total if record.is_recorded else None
            }
            for col, mark in zip(item_cols, record.marks):
                row[col] = mark
            rows.append(row)
        
        df = pd.DataFrame(rows, columns=columns)
        # Nullable integers so unrecorded rows export as blanks, not NaN
        int_cols = [cols['record_id'], cols['total']] + item_cols
        df[int_cols] = df[int_cols].astype('Int64')
        return df
    
    def export_string(self) -> str:
        """Tab-separated export, ready to paste into a spreadsheet"""
        return self.to_frame().to_csv(sep='\t', index=False, na_rep='', lineterminator='\n')
    
    def __str__(self) -> str:
        lines = []
        for record in self.records:
            if record.is_recorded:
                line = f"{record.record_id:<{Config.RECORD_ID_WIDTH}}"
            else:
                line = ' ' * Config.RECORD_ID_WIDTH
            
            name = record.name[:Config.NAME_WIDTH]
            line += f"{name:<{Config.NAME_WIDTH}}"
            
            if record.is_recorded:
                line += f" {record.total:>{Config.TOTAL_WIDTH}} = {record.marks}"
            lines.append(line)
        
        return ''.join(line + '\n' for line in lines)
