"""Sequential execution of the tool invocations in a message."""

import logging
import time

import httpx

from chat_tools.config import ToolSettings
from chat_tools.dispatcher import ToolRegistry
from chat_tools.errors import UnknownToolError
from chat_tools.models import ParsedMessage, ToolInvocation

logger = logging.getLogger(__name__)


class ToolExecutor:
    """Runs each invocation's handler in parse order.

    Invocations are awaited one at a time, never concurrently, so results
    always line up with the order the directives appear in the text.

    Args:
        registry: Alias table, defaults to the built-in tools.
        client: HTTP client handed to network handlers. The caller owns it.
        settings: Settings handed to network handlers.
    """

    def __init__(
        self,
        registry: ToolRegistry | None = None,
        client: httpx.AsyncClient | None = None,
        settings: ToolSettings | None = None,
    ):
        self.registry = registry or ToolRegistry()
        self.client = client
        self.settings = settings

    async def execute(self, message: ParsedMessage) -> ParsedMessage:
        """Return a copy of ``message`` with every invocation's result set.

        The input message is left untouched.
        """
        processed = [await self.run_invocation(inv) for inv in message.tools]
        return message.model_copy(update={"tools": processed})

    async def run_invocation(self, invocation: ToolInvocation) -> ToolInvocation:
        """Resolve and run a single invocation, returning an updated copy."""
        start_time = time.perf_counter()
        spec = self.registry.resolve(invocation.tool)

        if spec is None:
            result = UnknownToolError(invocation.tool).to_result()
        elif spec.is_async:
            result = await spec.handler(
                spec.join_args(invocation.args),
                client=self.client,
                settings=self.settings,
            )
        else:
            result = spec.handler(spec.join_args(invocation.args))

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Tool %s -> %s in %.1fms",
            invocation.tool,
            spec.name if spec else "<unknown>",
            elapsed_ms,
        )
        return invocation.model_copy(update={"result": result, "duration_ms": elapsed_ms})
