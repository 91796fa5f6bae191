"""Inline tool directives for chat messages.

Recognizes ``[calculator: 2+2]``, ``[search: weather today]`` and
``[fetch: https://example.com]`` in message text, runs the matching tool and
rewrites the message with the results::

    parsed = parse("2+2 is [calc: 2+2]")
    executed = await execute(parsed)
    format_message(executed)  # '2+2 is [calc: 2+2] → 4'
"""

from .config import ToolSettings, get_settings
from .dispatcher import ToolRegistry, ToolSpec
from .executor import ToolExecutor
from .formatter import format_message
from .models import ParsedMessage, ToolInvocation
from .parsers import BaseParser, BracketParser
from .pipeline import execute, parse, process_message

__all__ = [
    "parse",
    "execute",
    "format_message",
    "process_message",
    "ParsedMessage",
    "ToolInvocation",
    "BaseParser",
    "BracketParser",
    "ToolExecutor",
    "ToolRegistry",
    "ToolSpec",
    "ToolSettings",
    "get_settings",
]
