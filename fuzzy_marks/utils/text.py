"""Name normalisation helpers"""
from typing import Optional


def normalize_name(text: Optional[str]) -> str:
    """Lowercase and collapse every whitespace run into a single space"""
    if text is None:
        return ''
    return ' '.join(str(text).lower().split())


def is_blank(text: Optional[str]) -> bool:
    return normalize_name(text) == ''
