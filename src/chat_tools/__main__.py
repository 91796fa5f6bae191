"""
Run the tool pipeline on a message from the command line.

Usage:
    python -m chat_tools "What is [calc: 2**8]?"
    python -m chat_tools --json "[search: latest news]"
    echo "[fetch: https://example.com]" | python -m chat_tools
"""

import argparse
import asyncio
import sys

from chat_tools.config import get_settings
from chat_tools.formatter import format_message
from chat_tools.log_config import setup_logging
from chat_tools.pipeline import execute, parse


async def run(text: str, as_json: bool) -> str:
    """Process ``text`` and return what should be printed."""
    executed = await execute(parse(text))
    if as_json:
        return executed.model_dump_json(indent=2)
    return format_message(executed)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        prog="chat_tools",
        description="Expand [tool: args] directives in a chat message",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    arg_parser.add_argument(
        "message",
        nargs="?",
        help="Message text (read from stdin when omitted)"
    )
    arg_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the processed message as JSON instead of display text"
    )
    arg_parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: CHAT_TOOLS_LOG_LEVEL or INFO)"
    )

    args = arg_parser.parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)

    text = args.message if args.message is not None else sys.stdin.read().rstrip("\n")
    print(asyncio.run(run(text, args.json)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
