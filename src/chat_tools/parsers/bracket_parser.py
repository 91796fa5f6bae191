"""Regex-based parser for bracketed tool directives."""

import logging
import re
import time

from chat_tools.models import ToolInvocation, ParsedMessage
from chat_tools.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class BracketParser(BaseParser):
    """Extracts ``[name: arg, arg]`` directives from chat messages.

    Rules:
        - ``name`` is one or more word characters and is lower-cased
        - whitespace after the colon is skipped
        - the body runs up to the first ``]``; nested brackets are not supported
        - the body is split on commas and every segment is trimmed
        - directives with no colon, empty name or empty body stay literal text

    Every invocation carries the span of its directive so the formatter can
    splice results back by offset.
    """

    # ASCII so tool names stay within [A-Za-z0-9_]
    DIRECTIVE_PATTERN = re.compile(r"\[(\w+):\s*([^\]]+)\]", re.ASCII)

    @property
    def name(self) -> str:
        """Return the parser identifier."""
        return "bracket-parser"

    def parse(self, text: str) -> ParsedMessage:
        """Parse text and extract tool invocations.

        Args:
            text: Raw chat message text.

        Returns:
            ParsedMessage with ``content`` equal to ``text``.
        """
        start_time = time.perf_counter()
        tools = self._extract_invocations(text)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.debug("Parsed %d tool invocation(s) in %.3fms", len(tools), elapsed_ms)
        return ParsedMessage(
            content=text,
            tools=tools,
            parse_time_ms=elapsed_ms,
            parser_name=self.name,
        )

    def _extract_invocations(self, text: str) -> list[ToolInvocation]:
        invocations: list[ToolInvocation] = []
        for match in self.DIRECTIVE_PATTERN.finditer(text):
            tool_name, body = match.groups()
            invocations.append(
                ToolInvocation(
                    tool=tool_name.lower(),
                    args=self._split_args(body),
                    span=match.span(),
                    raw=match.group(0),
                )
            )
        return invocations

    @staticmethod
    def _split_args(body: str) -> list[str]:
        return [segment.strip() for segment in body.split(",")]
