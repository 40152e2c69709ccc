"""Formatting helpers for presenting articles."""

from datetime import datetime

PUBLISHED_FORMAT = "%B %d, %Y at %I:%M %p"


def format_published_at(value: str) -> str:
    """Format an ISO-8601 publication timestamp for display.

    Args:
        value: The article's ``published_at`` token.

    Returns:
        e.g. "March 20, 2025 at 02:30 PM", or ``value`` unchanged if it
        cannot be parsed.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    return parsed.strftime(PUBLISHED_FORMAT)
