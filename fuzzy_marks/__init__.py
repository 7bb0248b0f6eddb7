"""Fuzzy roster name matching for recording student marks"""
from .core import Matcher, Scorer, match_names, parse_input
from .data import MarkRecord, MarksBook, MatchResult, Roster, RosterEntry
from .agents import MarkingAgent

__version__ = '1.0.0'

__all__ = [
    'Matcher', 'Scorer', 'match_names', 'parse_input',
    'MarkRecord', 'MarksBook', 'MatchResult', 'Roster', 'RosterEntry',
    'MarkingAgent'
]
