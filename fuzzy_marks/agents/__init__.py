"""Marking session agent"""
from .marking_agent import MarkingAgent

__all__ = ['MarkingAgent']
