"""Canned web search tool.

Answers come from a fixed table; there is no search backend.
"""

import logging

logger = logging.getLogger(__name__)

# Insertion order is the partial-match priority
CANNED_RESULTS: dict[str, str] = {
    "weather today": "Today's weather: Partly cloudy, 72°F (22°C), with a gentle breeze.",
    "latest news": "Top headlines: Tech stocks rise, New climate accord signed, Sports team wins championship.",
    "time in tokyo": "Current time in Tokyo: 2:30 PM JST (UTC+9)",
    "python tutorial": "Python basics: Variables, loops, functions. Visit python.org for comprehensive guides.",
    "recipe chocolate cake": "Simple chocolate cake: Mix flour, cocoa, sugar, eggs, butter. Bake at 350°F for 30 mins.",
}


def web_search(query: str) -> str:
    """Search tool handler.

    Lookup order:
        1. exact match on the lower-cased query
        2. first table key contained in the query, or containing it
        3. a generic answer echoing the query as written

    Args:
        query: Search text, e.g. ``"Weather today"``.

    Returns:
        A canned answer string.
    """
    lowered = query.lower()
    if lowered in CANNED_RESULTS:
        return CANNED_RESULTS[lowered]

    for key, answer in CANNED_RESULTS.items():
        if key in lowered or lowered in key:
            logger.debug("Search query %r partially matched %r", query, key)
            return answer

    return (
        f'Search results for "{query}": Multiple relevant results found. '
        "Visit your favorite search engine for detailed information."
    )
