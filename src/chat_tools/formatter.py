"""Rewrites message text with inline tool results."""

import logging
import re

from chat_tools.models import ParsedMessage, ToolInvocation

logger = logging.getLogger(__name__)

PENDING_RESULT = "Processing..."


def render_invocation(invocation: ToolInvocation) -> str:
    """Display string for one invocation, e.g. ``[calculator: 2+2] → 4``."""
    result = invocation.result if invocation.result is not None else PENDING_RESULT
    return f"{invocation.display} → {result}"


def locate_invocation(content: str, invocation: ToolInvocation, start: int = 0) -> tuple[int, int] | None:
    """Find an invocation without a recorded span.

    The directive is rebuilt from the tool name and escaped arguments and
    matched case-insensitively, tolerating any whitespace around the colon
    and commas.
    """
    body = r"\s*,\s*".join(re.escape(arg) for arg in invocation.args)
    pattern = re.compile(
        r"\[" + re.escape(invocation.tool) + r":\s*" + body + r"\s*\]",
        re.IGNORECASE,
    )
    match = pattern.search(content, start)
    return match.span() if match else None


def format_message(message: ParsedMessage) -> str:
    """Replace every directive in the content with its display string.

    Directives are spliced by their parse-time span, left to right; text
    between them is copied verbatim. An invocation that has no span and
    cannot be located is left as written.
    """
    content = message.content
    pieces: list[str] = []
    cursor = 0

    for invocation in message.tools:
        span = invocation.span or locate_invocation(content, invocation, cursor)
        if span is None or span[0] < cursor:
            logger.debug("Could not place %s in message; left unformatted", invocation.display)
            continue

        start, end = span
        pieces.append(content[cursor:start])
        pieces.append(render_invocation(invocation))
        cursor = end

    pieces.append(content[cursor:])
    return "".join(pieces)
