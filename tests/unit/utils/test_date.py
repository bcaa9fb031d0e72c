"""Tests for the date utility functions."""

from mcp_jira.utils import parse_date


def test_parse_date_empty():
    """Test that parse_date returns an empty string for missing dates."""
    assert parse_date(None) == ""
    assert parse_date("") == ""


def test_parse_date_invalid_input():
    """Test that parse_date returns the input unchanged when it cannot parse it."""
    assert parse_date("invalid") == "invalid"


def test_parse_date_jira_timestamp():
    """Test that Jira's ISO 8601 timestamps are rendered in the display format."""
    assert parse_date("2023-01-02T12:30:00.000+0000") == "2023-01-02 12:30:00"


def test_parse_date_epoch():
    """Test that epoch millisecond timestamps are supported."""
    assert parse_date("1612156800000") == "2021-02-01 05:20:00"


def test_parse_date_custom_format():
    assert parse_date("2021-01-01T00:00:00Z", format_string="%Y-%m-%d") == "2021-01-01"
