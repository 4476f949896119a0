"""Text and number formatting utilities."""

from __future__ import annotations


def format_percentage(value: float) -> str:
    """Format a 0-100 value as a whole percentage.

    Args:
        value: Percentage value (0-100)

    Returns:
        Formatted percentage string
    """
    return f"{round(value)}%"


def format_plural(count: int, noun: str) -> str:
    """Format a count with a naively pluralised noun (``1 day``, ``3 days``)."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
