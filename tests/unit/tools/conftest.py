"""
Test fixtures for tool handler tests.

Handlers receive an ``AppContext`` whose fetcher is a spec'd MagicMock, so
each test scripts the fetcher methods it needs.
"""

from unittest.mock import MagicMock

import pytest

from mcp_jira.context import AppContext
from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig
from mcp_jira.models.jira import CustomFieldMap, JiraField, JiraIssue, JiraSearchResult
from tests.utils.factories import JiraFieldFactory


@pytest.fixture
def mock_jira():
    return MagicMock(spec=JiraFetcher)


@pytest.fixture
def custom_fields():
    return CustomFieldMap.from_catalog(
        [JiraField.from_api_response(f) for f in JiraFieldFactory.catalog()]
    )


@pytest.fixture
def app_context(mock_jira, custom_fields):
    config = JiraConfig(
        url="https://test.atlassian.net",
        username="test@example.com",
        api_token="test_token",
    )
    return AppContext(jira=mock_jira, config=config, custom_fields=custom_fields)


@pytest.fixture
def search_result():
    """Factory for search results built from issue payloads."""

    def _create(*issues, total=None, start_at=0, max_results=20):
        return JiraSearchResult(
            total=total,
            start_at=start_at,
            max_results=max_results,
            issues=[JiraIssue.from_api_response(issue) for issue in issues],
        )

    return _create

