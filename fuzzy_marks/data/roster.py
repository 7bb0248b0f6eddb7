"""Roster construction from pasted text, name lists or DataFrames"""
from typing import Iterable, Iterator, List, Optional, Sequence, Union
import pandas as pd
from .models import RosterEntry
from ..utils.config import Config


class Roster(Sequence[RosterEntry]):
    """Immutable, ordered list of roster entries."""

    def __init__(self, entries: Iterable[RosterEntry] = ()):
        self._entries = tuple(entries)
    
    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return Roster(self._entries[index])
        return self._entries[index]
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __iter__(self) -> Iterator[RosterEntry]:
        return iter(self._entries)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        return self._entries == other._entries
    
    def __repr__(self) -> str:
        return f"Roster({len(self._entries)} students)"
    
    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]
    
    @classmethod
    def from_names(cls, names: Iterable[str]) -> 'Roster':
        """Roster from bare names; identifiers are 1-based positions"""
        return cls(
            RosterEntry(name=str(name), student_id=str(i))
            for i, name in enumerate(names, 1)
        )
    
    @classmethod
    def from_text(cls, text: str) -> 'Roster':
        """
        Parse a roster pasted as text, one student per line.
        
        A line holding a tab is read as "student_id<TAB>name", any further
        tabs becoming spaces in the name. A line without a tab is a bare name
        whose identifier is its position in the roster. Blank lines are
        skipped.
        
        Args:
            text: Pasted roster text (e.g. a spreadsheet column)
            
        Returns:
            Roster in line order
        """
        entries = []
        for line in (text or '').splitlines():
            if not line.strip():
                continue
            
            position = str(len(entries) + 1)
            if '\t' in line:
                student_id, name = line.split('\t', 1)
                name = name.replace('\t', ' ').strip()
                student_id = student_id.strip() or position
                if not name:
                    # "id<TAB>" with nothing after it: keep the id as the name
                    name, student_id = student_id, position
            else:
                name, student_id = line.strip(), position
            
            entries.append(RosterEntry(name=name, student_id=student_id))
        
        print(f"✓ Parsed roster from text: {len(entries)} students")
        return cls(entries)
    
    @classmethod
    def from_frame(cls, roster_df: pd.DataFrame, name_col: Optional[str] = None,
                   id_col: Optional[str] = None) -> 'Roster':
        """
        Roster from a DataFrame.
        
        Args:
            roster_df: One row per student
            name_col: Name column (default: Config.ROSTER_COLS['name'])
            id_col: Identifier column (default: Config.ROSTER_COLS['student_id']);
                positions are used when the column is absent
                
        Returns:
            Roster in row order, rows without a name skipped
        """
        name_col = name_col or Config.ROSTER_COLS['name']
        id_col = id_col or Config.ROSTER_COLS['student_id']
        
        roster_df = roster_df.copy()
        # Normalize column names (strip whitespace)
        roster_df.columns = [str(col).strip() for col in roster_df.columns]
        
        if name_col not in roster_df.columns:
            raise ValueError(f"Roster name column not found: {name_col} (columns: {list(roster_df.columns)})")
        
        has_ids = id_col in roster_df.columns
        if not has_ids:
            print(f"⚠️ Roster has no '{id_col}' column, numbering students by position")
        
        entries = []
        skipped = 0
        for _, row in roster_df.iterrows():
            name = row[name_col]
            if pd.isna(name) or not str(name).strip():
                skipped += 1
                continue
            
            student_id = row[id_col] if has_ids else None
            if student_id is None or pd.isna(student_id):
                student_id = len(entries) + 1
            elif isinstance(student_id, float) and student_id.is_integer():
                # Numeric ids come back from spreadsheets as floats
                student_id = int(student_id)

            entries.append(RosterEntry(name=str(name).strip(), student_id=str(student_id)))
        
        if skipped:
            print(f"⚠️ Skipped {skipped} roster rows without a name")
        print(f"✓ Loaded roster from DataFrame: {len(entries)} students")
        return cls(entries)
    
    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{'student_id': e.student_id, 'name': e.name} for e in self._entries],
            columns=['student_id', 'name']
        )
