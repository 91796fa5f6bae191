"""Tests for sequential tool execution."""

import asyncio

import httpx
import pytest

from chat_tools.config import ToolSettings
from chat_tools.dispatcher import ToolRegistry, ToolSpec
from chat_tools.executor import ToolExecutor
from chat_tools.parsers import BracketParser


@pytest.fixture
def parser():
    return BracketParser()


class TestToolExecutor:
    """Tests for ToolExecutor."""

    @pytest.mark.asyncio
    async def test_results_populated(self, parser):
        """Test each invocation gets its handler's result."""
        message = parser.parse("[calculator: 1+1] and [search: weather today]")
        executed = await ToolExecutor().execute(message)

        assert executed.is_complete
        assert executed.tools[0].result == "2"
        assert executed.tools[1].result.startswith("Today's weather")
        assert all(inv.duration_ms is not None for inv in executed.tools)

    @pytest.mark.asyncio
    async def test_unknown_tool(self, parser):
        """Test unknown tools get a result instead of failing the message."""
        executed = await ToolExecutor().execute(parser.parse("[translate: hola] [calc: 3*3]"))
        assert executed.tools[0].result == "Unknown tool: translate"
        assert executed.tools[1].result == "9"

    @pytest.mark.asyncio
    async def test_input_not_mutated(self, parser):
        """Test execute returns a copy and leaves the input alone."""
        message = parser.parse("[calc: 2+2]")
        executed = await ToolExecutor().execute(message)
        assert message.tools[0].result is None
        assert executed.tools[0].result == "4"
        assert executed.content == message.content

    @pytest.mark.asyncio
    async def test_calculator_args_joined_without_separator(self, parser):
        """Test commas inside a calculation are dropped, not treated as spaces."""
        executed = await ToolExecutor().execute(parser.parse("[calc: 1,000 + 1]"))
        assert executed.tools[0].result == "1001"

    @pytest.mark.asyncio
    async def test_sequential_in_parse_order(self, parser):
        """Test a slow handler finishes before the next one starts."""
        events = []

        async def slow(text, client=None, settings=None):
            events.append(f"start {text}")
            await asyncio.sleep(0.02)
            events.append(f"end {text}")
            return f"slow:{text}"

        def fast(text):
            events.append(f"fast {text}")
            return f"fast:{text}"

        registry = ToolRegistry([
            ToolSpec(name="slow", handler=slow, separator=" ", is_async=True),
            ToolSpec(name="fast", handler=fast, separator=" "),
        ])
        executed = await ToolExecutor(registry=registry).execute(
            parser.parse("[slow: a] [fast: b] [slow: c]")
        )

        assert events == ["start a", "end a", "fast b", "start c", "end c"]
        assert [inv.result for inv in executed.tools] == ["slow:a", "fast:b", "slow:c"]

    @pytest.mark.asyncio
    async def test_client_and_settings_passed_to_fetch(self, parser):
        """Test the injected HTTP client is used for fetch invocations."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"contents": "<title>Hi</title><p>there</p>"})

        settings = ToolSettings(proxy_url="https://relay.test/get")
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            executor = ToolExecutor(client=client, settings=settings)
            executed = await executor.execute(parser.parse("[webpage: https://example.com]"))

        assert executed.tools[0].result == "Title: Hi\n\nContent preview: Hithere"
