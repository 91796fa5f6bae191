"""Visible-text extraction from raw HTML."""

import re
from html.parser import HTMLParser

HIDDEN_ELEMENTS = frozenset({"script", "style"})
WHITESPACE_RUN = re.compile(r"\s+")
TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)


class VisibleTextParser(HTMLParser):
    """Collects character data that is not inside ``<script>`` or ``<style>``.

    Tracks how many hidden elements are currently open; data is kept only
    while that depth is zero. Comments, doctypes and processing
    instructions are ignored. Character references are decoded.
    """

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self._hidden_depth = 0
        self._chunks: list[str] = []

    def handle_starttag(self, tag, attrs):
        if tag in HIDDEN_ELEMENTS:
            self._hidden_depth += 1

    def handle_endtag(self, tag):
        if tag in HIDDEN_ELEMENTS and self._hidden_depth > 0:
            self._hidden_depth -= 1

    def handle_data(self, data):
        if self._hidden_depth == 0:
            self._chunks.append(data)

    @property
    def text(self) -> str:
        return "".join(self._chunks)


def extract_visible_text(html: str) -> str:
    """Return the page text with whitespace runs collapsed and ends trimmed."""
    parser = VisibleTextParser()
    parser.feed(html)
    parser.close()
    return WHITESPACE_RUN.sub(" ", parser.text).strip()


def extract_title(html: str, default: str = "No title") -> str:
    """Return the first ``<title>`` text, trimmed, or ``default``."""
    match = TITLE_PATTERN.search(html)
    return match.group(1).strip() if match else default


def truncate(text: str, max_chars: int) -> str:
    if len(text) > max_chars:
        return text[:max_chars] + "..."
    return text
