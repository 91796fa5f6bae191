"""Webpage fetch tool.

Pages are fetched through a public CORS relay that wraps the origin's HTML
in a JSON envelope (``{"contents": "<html>...", "status": {...}}``).
"""

import logging
import re
from typing import Any
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, Field

from chat_tools.config import ToolSettings, get_settings
from chat_tools.errors import (
    FetchError,
    FetchHTTPError,
    InvalidURLError,
    ToolError,
    UnsupportedSchemeError,
)
from chat_tools.handlers.html_text import extract_title, extract_visible_text, truncate

logger = logging.getLogger(__name__)

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
ALLOWED_SCHEMES = ("http", "https")


class RelayEnvelope(BaseModel):
    """JSON body returned by the relay."""

    contents: str | None = Field(default=None)
    status: dict[str, Any] = Field(default_factory=dict)


def validate_url(url: str) -> str:
    """Check that ``url`` is an absolute http(s) URL.

    Returns:
        The URL with surrounding whitespace removed.

    Raises:
        InvalidURLError: Not an absolute URL.
        UnsupportedSchemeError: Absolute, but not http or https.
    """
    candidate = url.strip()
    if not SCHEME_PATTERN.match(candidate):
        raise InvalidURLError(candidate)

    try:
        parts = urlsplit(candidate)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise InvalidURLError(candidate) from e

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise UnsupportedSchemeError(scheme)

    hostname = parts.hostname or ""
    if not hostname or any(ch.isspace() for ch in hostname):
        raise InvalidURLError(candidate)
    return candidate


def render_page(html: str, max_chars: int) -> str:
    """Build the ``Title: ...`` preview string for a page."""
    text = truncate(extract_visible_text(html), max_chars)
    return f"Title: {extract_title(html)}\n\nContent preview: {text}"


async def _request_page(
    client: httpx.AsyncClient, url: str, settings: ToolSettings
) -> str:
    response = await client.get(
        settings.proxy_url,
        params={"url": url},
        headers={"Accept": settings.accept_header},
        follow_redirects=True,
    )
    if not response.is_success:
        raise FetchHTTPError(response.status_code)

    envelope = RelayEnvelope.model_validate(response.json())
    if envelope.contents is None:
        raise FetchError("Relay response has no page contents")
    return envelope.contents


async def fetch_webpage(
    url: str,
    client: httpx.AsyncClient | None = None,
    settings: ToolSettings | None = None,
) -> str:
    """Webpage fetch tool handler.

    Args:
        url: Absolute http(s) URL of the page.
        client: Shared HTTP client. A short-lived one is created when omitted.
        settings: Relay and preview settings, defaults to ``get_settings()``.

    Returns:
        ``"Title: <title>\\n\\nContent preview: <text>"`` or an ``Error: ...``
        string. Never raises.
    """
    try:
        settings = settings or get_settings()
        target = validate_url(url)
        if client is None:
            async with httpx.AsyncClient(timeout=settings.request_timeout_sec) as own_client:
                html = await _request_page(own_client, target, settings)
        else:
            html = await _request_page(client, target, settings)
        return render_page(html, settings.max_preview_chars)
    except ToolError as e:
        logger.warning("Webpage fetch for %r failed: %s", url, e.to_result())
        return e.to_result()
    except Exception as e:
        logger.warning("Webpage fetch for %r failed unexpectedly: %s", url, e)
        return FetchError(str(e) or type(e).__name__).to_result()
