"""Parsing of the single-line marking input"""
from dataclasses import dataclass, field
from typing import List, Union
from ..utils.config import Config


@dataclass(frozen=True)
class QueryCommand:
    """Look a student up by (part of) their name."""
    query: str


@dataclass(frozen=True)
class MarksCommand:
    """Record item marks, e.g. "alic smith = 3 4 5"."""
    query: str
    marks: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class ExportCommand:
    pass


@dataclass(frozen=True)
class ClearCommand:
    pass


Command = Union[QueryCommand, MarksCommand, ExportCommand, ClearCommand]


def parse_marks(text: str) -> List[int]:
    """Whitespace separated marks, each plain ASCII decimal digits"""
    marks = []
    for item in text.split():
        # int() would also take "+3", "1_000" and non-ASCII digits
        if not (item.isascii() and item.isdigit()):
            raise ValueError(f"Invalid mark: {item!r}")
        marks.append(int(item))
    return marks


def parse_input(line: str) -> Command:
    """
    Turn one input line into a command.
    
    Args:
        line: Raw input as typed
        
    Returns:
        ExportCommand / ClearCommand for the escapes, MarksCommand for
        "<query> = <marks>", QueryCommand otherwise
        
    Raises:
        ValueError: unknown escape or malformed marks
    """
    text = line.strip()
    
    if text == Config.EXPORT_COMMAND:
        return ExportCommand()
    if text == Config.CLEAR_COMMAND:
        return ClearCommand()
    if text.startswith(':'):
        raise ValueError(f"Undefined escape: {text}")
    
    if '=' in line:
        parts = line.split('=')
        if len(parts) != 2:
            raise ValueError(f"Invalid marks input: {line}")
        query, marks = parts
        return MarksCommand(query=query.strip(), marks=parse_marks(marks))
    
    return QueryCommand(query=line)
