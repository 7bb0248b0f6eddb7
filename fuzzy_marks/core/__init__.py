"""Core matching and scoring engine"""
from .scorer import Scorer
from .matcher import Matcher, match_names
from .commands import parse_input

__all__ = ['Scorer', 'Matcher', 'match_names', 'parse_input']
