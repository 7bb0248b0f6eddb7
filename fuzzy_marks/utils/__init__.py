"""Utility modules for configuration and text handling"""
from .config import Config
from .text import normalize_name, is_blank

__all__ = ['Config', 'normalize_name', 'is_blank']
