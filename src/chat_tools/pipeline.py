"""Module-level entry points: parse, execute, format_message.

Callers run ``parse`` then ``execute`` then ``format_message`` (or
``process_message`` for all three) and use the result for display only.
"""

import httpx

from chat_tools.config import ToolSettings
from chat_tools.executor import ToolExecutor
from chat_tools.formatter import format_message
from chat_tools.models import ParsedMessage
from chat_tools.parsers import BracketParser

_parser = BracketParser()


def parse(text: str) -> ParsedMessage:
    """Extract tool invocations from ``text``."""
    return _parser.parse(text)


async def execute(
    message: ParsedMessage,
    client: httpx.AsyncClient | None = None,
    settings: ToolSettings | None = None,
) -> ParsedMessage:
    """Run every invocation in ``message`` and return it with results set."""
    return await ToolExecutor(client=client, settings=settings).execute(message)


async def process_message(
    text: str,
    client: httpx.AsyncClient | None = None,
    settings: ToolSettings | None = None,
) -> str:
    """Parse, execute and format ``text`` in one call."""
    parsed = parse(text)
    if not parsed.has_tools:
        return text
    executed = await execute(parsed, client=client, settings=settings)
    return format_message(executed)
