"""Roster and marks data modules"""
from .models import RosterEntry, MatchResult, MarkRecord
from .roster import Roster
from .marks import MarksBook

__all__ = ['RosterEntry', 'MatchResult', 'MarkRecord', 'Roster', 'MarksBook']
