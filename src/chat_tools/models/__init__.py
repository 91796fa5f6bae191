"""Data models for tool invocations and parsed messages.

This module provides Pydantic-validated models for:
- ToolInvocation: A bracketed tool directive and its result
- ParsedMessage: A chat message together with its ordered invocations
"""

from .invocation import ToolInvocation, ParsedMessage

__all__ = ["ToolInvocation", "ParsedMessage"]
