"""
Test fixtures for Jira unit tests.

The atlassian client is replaced by a MagicMock so each test can script the
REST responses returned by ``get``/``post``/``put``.
"""

from unittest.mock import MagicMock, patch

import pytest

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(url="https://custom.atlassian.net")
            assert config.url == "https://custom.atlassian.net"
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://test.atlassian.net",
            "username": "test@example.com",
            "api_token": "test_token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    return jira_config_factory()


@pytest.fixture
def mock_atlassian_jira():
    """Mock of ``atlassian.Jira`` with empty default responses."""
    mock_jira = MagicMock()
    mock_jira.get.return_value = {}
    mock_jira.post.return_value = {}
    mock_jira.put.return_value = None
    return mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """
    Create a JiraFetcher instance with mocked dependencies.

    Returns:
        JiraFetcher: Fetcher whose ``jira`` attribute is the mock client
    """
    with patch("mcp_jira.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        fetcher = JiraFetcher(config=mock_config)
        yield fetcher

