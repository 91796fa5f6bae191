"""Parser implementations."""

from .base import BaseParser
from .bracket_parser import BracketParser

__all__ = [
    "BaseParser",
    "BracketParser",
]
