"""Tool handler implementations.

Every handler returns a display string and converts its own failures into
``Error: ...`` strings.
"""

from .calculator import calculate_expression, evaluate_expression, format_number
from .search import web_search
from .webfetch import fetch_webpage

__all__ = [
    "calculate_expression",
    "evaluate_expression",
    "format_number",
    "web_search",
    "fetch_webpage",
]
