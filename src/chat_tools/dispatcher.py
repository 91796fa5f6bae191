"""Alias table mapping tool names to handlers."""

from dataclasses import dataclass, field
from typing import Awaitable, Callable

from chat_tools.handlers import calculate_expression, fetch_webpage, web_search


@dataclass(frozen=True)
class ToolSpec:
    """A tool handler and how its arguments are joined before the call.

    ``is_async`` handlers receive an extra ``client`` keyword so callers can
    share one HTTP client across invocations.
    """
    name: str
    handler: Callable[..., str] | Callable[..., Awaitable[str]]
    separator: str
    aliases: tuple[str, ...] = field(default_factory=tuple)
    is_async: bool = False

    def join_args(self, args: list[str]) -> str:
        return self.separator.join(args)


DEFAULT_TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="calculator",
        handler=calculate_expression,
        separator="",
        aliases=("calculator", "calc"),
    ),
    ToolSpec(
        name="search",
        handler=web_search,
        separator=" ",
        aliases=("search", "web"),
    ),
    ToolSpec(
        name="fetch",
        handler=fetch_webpage,
        separator=" ",
        aliases=("fetch", "fetchwebpage", "webpage"),
        is_async=True,
    ),
)


class ToolRegistry:
    """Maps tool names and their aliases to ToolSpecs."""

    def __init__(self, tools: tuple[ToolSpec, ...] | list[ToolSpec] = DEFAULT_TOOLS):
        self._tools = list(tools)
        self._by_alias: dict[str, ToolSpec] = {}
        for spec in self._tools:
            for alias in spec.aliases or (spec.name,):
                alias = alias.lower()
                if alias in self._by_alias:
                    raise ValueError(
                        f"Alias '{alias}' is claimed by both "
                        f"'{self._by_alias[alias].name}' and '{spec.name}'"
                    )
                self._by_alias[alias] = spec

    def resolve(self, name: str) -> ToolSpec | None:
        """Return the spec for ``name`` (case-insensitive), or None."""
        return self._by_alias.get(name.lower())

    def names(self) -> list[str]:
        """Canonical tool names in registration order."""
        return [spec.name for spec in self._tools]

    def aliases(self) -> dict[str, str]:
        """Alias to canonical name mapping."""
        return {alias: spec.name for alias, spec in self._by_alias.items()}

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tools={self.names()})"
