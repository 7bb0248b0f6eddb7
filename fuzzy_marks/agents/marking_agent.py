"""Marking session agent: roster lookup and marks recording from typed input"""
from typing import Dict, Optional, Union
from ..core.commands import ClearCommand, ExportCommand, MarksCommand, QueryCommand, parse_input
from ..core.matcher import Matcher
from ..core.scorer import Scorer
from ..data.marks import MarksBook
from ..data.roster import Roster
from ..utils.config import Config
from ..utils.text import is_blank


class MarkingAgent:
    """
    Drives one marking session.
    
    A teaching assistant types (part of) a student's name, the book is
    reordered so the best match is on top, and "name = 3 4 5" records item
    marks for that top row.
    """
    
    def __init__(self, roster: Optional[Union[Roster, str]] = None, scorer: Optional[Scorer] = None):
        """
        Initialize the marking agent.
        
        Args:
            roster: Roster, or pasted roster text (optional)
            scorer: Similarity scorer (default: Config.MATCH_METRIC)
        """
        self.scorer = scorer or Scorer()
        self.roster = Roster()
        self.matcher = Matcher(self.roster, self.scorer)
        self.book = MarksBook(self.scorer)
        
        if roster is not None:
            self.load_roster(roster)
    
    def load_roster(self, roster: Union[Roster, str]) -> Roster:
        """Start a fresh marks book for a roster (or pasted roster text)"""
        if isinstance(roster, str):
            roster = Roster.from_text(roster)
        
        self.roster = roster
        self.matcher = Matcher(roster, self.scorer)
        self.book = MarksBook.from_roster(roster, self.scorer)
        return roster
    
    def recommend(self, query: str, top_k: Optional[int] = None) -> Dict:
        """
        Best roster matches for a query, without touching the marks book.
        
        Args:
            query: Raw text typed by the user
            top_k: Number of candidates (default: Config.TOP_K)
            
        Returns:
            Dictionary with the query and its candidates
        """
        candidates = self.matcher.top(query, k=top_k)
        return {
            'query': query,
            'candidates': [c.to_dict() for c in candidates],
            'best': candidates[0].to_dict() if candidates else None
        }
    
    def handle(self, line: str) -> Dict:
        """
        Run one line of input.
        
        Returns:
            Dictionary with 'action' (query / record / export / clear / error)
            and an 'output' text for the host to show
        """
        try:
            command = parse_input(line)
            
            if isinstance(command, QueryCommand):
                return self._handle_query(command)
            if isinstance(command, MarksCommand):
                return self._handle_marks(command)
            if isinstance(command, ExportCommand):
                return self._handle_export()
            if isinstance(command, ClearCommand):
                return self._handle_clear()
            
            raise ValueError(f"Unsupported command: {command!r}")
        
        except ValueError as e:
            print(f"⚠️ Failed handling input {line!r}: {e}")
            return {
                'action': 'error',
                'error': str(e),
                'output': str(self.book)
            }
    
    def _handle_query(self, command: QueryCommand) -> Dict:
        if not is_blank(command.query):
            self.book.sort_with(command.query)
        
        result = self.recommend(command.query)
        # Marks typed next go to the top row, so report that row as best
        top = self.book.top()
        if result['best'] is not None and top is not None:
            result['best'] = {
                'rank': 0,
                'student_id': top.student_id,
                'name': top.name,
                'score': self.scorer.score(command.query, top.name)
            }
        result['action'] = 'query'
        result['output'] = str(self.book)
        return result
    
    def _handle_marks(self, command: MarksCommand) -> Dict:
        if not is_blank(command.query):
            self.book.sort_with(command.query)
        
        record = self.book.set_marks_at_top(command.marks)
        return {
            'action': 'record',
            'record': record.to_dict(),
            'output': str(self.book)
        }
    
    def _handle_export(self) -> Dict:
        print(f"✓ Exported {len(self.book)} rows")
        return {
            'action': 'export',
            'output': self.book.export_string()
        }
    
    def _handle_clear(self) -> Dict:
        self.book.clear()
        self.roster = Roster()
        self.matcher = Matcher(self.roster, self.scorer)
        print("✓ Cleared marks book")
        return {
            'action': 'clear',
            'output': ''
        }
