"""Data models for tool invocations and parsed chat messages.

This module provides Pydantic models for representing bracketed tool directives
(``[calculator: 2+2]``) extracted from chat messages.

Key features:
- Strict validation of tool names (word characters only)
- Source spans so results can be spliced back by offset
- Per-invocation timing populated by the executor
"""

import re
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator


TOOL_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class ToolInvocation(BaseModel):
    """A single tool directive found in a chat message.

    Attributes:
        tool: Lower-cased tool name as written in the message.
        args: Comma-split, trimmed contents of the bracket body.
        result: Display string set by the executor, None until then.
        span: Half-open ``(start, end)`` offsets of the directive in the
            original content, or None for hand-built invocations.
        raw: Exact directive text as it appeared in the content.
        duration_ms: Wall time the handler took, set by the executor.

    Example:
        >>> inv = ToolInvocation(tool="calculator", args=["2+2"])
        >>> inv.display
        '[calculator: 2+2]'
    """

    tool: str = Field(
        ...,
        min_length=1,
        description="Lower-cased tool name",
    )
    args: list[str] = Field(default_factory=list)
    result: str | None = Field(default=None)
    span: tuple[int, int] | None = Field(default=None)
    raw: str | None = Field(default=None)
    duration_ms: float | None = Field(default=None, ge=0.0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"tool": "calculator", "args": ["2+2"], "result": "4"},
                {"tool": "search", "args": ["weather today"]},
            ]
        },
    }

    @field_validator("tool")
    @classmethod
    def validate_tool_name(cls, v: str) -> str:
        """Tool names are one or more word characters."""
        if not TOOL_NAME_PATTERN.match(v):
            raise ValueError(
                f"Invalid tool name '{v}': must contain only letters, digits and underscores"
            )
        return v

    @field_validator("span")
    @classmethod
    def validate_span(cls, v: tuple[int, int] | None) -> tuple[int, int] | None:
        if v is None:
            return v
        start, end = v
        if start < 0 or end <= start:
            raise ValueError(f"Invalid span {v}: expected 0 <= start < end")
        return v

    @property
    def joined_args(self) -> str:
        """Arguments re-serialized with ``", "`` between them."""
        return ", ".join(self.args)

    @property
    def display(self) -> str:
        """Canonical directive text, e.g. ``[search: latest news]``."""
        return f"[{self.tool}: {self.joined_args}]"

    @property
    def has_result(self) -> bool:
        return self.result is not None


class ParsedMessage(BaseModel):
    """Result of parsing a chat message for tool directives.

    Attributes:
        content: Original message text, never modified by parsing.
        tools: Invocations ordered by first appearance in ``content``.
        parse_time_ms: Time taken to parse in milliseconds.
        parser_name: Name of the parser that produced this message.
    """

    content: str = Field(...)
    tools: list[ToolInvocation] = Field(default_factory=list)
    parse_time_ms: float = Field(default=0.0, ge=0.0)
    parser_name: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_spans(self) -> Self:
        """Spans must fall inside the content and must not overlap."""
        cursor = 0
        for inv in self.tools:
            if inv.span is None:
                continue
            start, end = inv.span
            if end > len(self.content):
                raise ValueError(
                    f"Span {inv.span} of '{inv.tool}' exceeds content length {len(self.content)}"
                )
            if start < cursor:
                raise ValueError(
                    f"Span {inv.span} of '{inv.tool}' overlaps or precedes the previous invocation"
                )
            cursor = end
        return self

    @property
    def num_tools(self) -> int:
        """Return the number of invocations found."""
        return len(self.tools)

    @property
    def has_tools(self) -> bool:
        """Return whether any invocations were found."""
        return len(self.tools) > 0

    @property
    def is_complete(self) -> bool:
        """Return whether every invocation has a result."""
        return all(inv.has_result for inv in self.tools)

    def get_tool_names(self) -> list[str]:
        """Get list of all tool names invoked, in order."""
        return [inv.tool for inv in self.tools]
