"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-jira")

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_date(date_str: str | None, format_string: str = DISPLAY_FORMAT) -> str:
    """
    Parse a Jira timestamp and render it in a fixed display format.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string
        format_string: The output format

    Returns:
        Formatted date string, empty string if date_str is empty, or the
        original string if it cannot be parsed
    """
    if not date_str:
        return ""

    try:
        if date_str.isdigit():
            date = datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
        else:
            date = dateutil.parser.parse(date_str)
        return date.strftime(format_string)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Could not parse date '{date_str}': {e}")

    return date_str
