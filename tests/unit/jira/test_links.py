"""Tests for the Jira links mixin."""

import pytest

from mcp_jira.exceptions import MCPJiraAuthenticationError
from tests.utils.mocks import make_http_error


class TestLinksMixin:
    def test_get_issue_link_types(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {
            "issueLinkTypes": [
                {"id": "1", "name": "Blocks", "inward": "is blocked by", "outward": "blocks"},
                {"id": "2", "name": "Relates", "inward": "relates to", "outward": "relates to"},
            ]
        }

        link_types = jira_fetcher.get_issue_link_types()

        mock_atlassian_jira.get.assert_called_once_with(
            "rest/api/3/issueLinkType", params=None
        )
        assert [t.name for t in link_types] == ["Blocks", "Relates"]
        assert link_types[1].matches("Relates To")
        assert not link_types[0].matches("relates to")

    def test_get_issue_link_types_auth_error(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.side_effect = make_http_error(401)

        with pytest.raises(MCPJiraAuthenticationError):
            jira_fetcher.get_issue_link_types()

    def test_create_issue_link(self, jira_fetcher, mock_atlassian_jira):
        jira_fetcher.create_issue_link(
            "Relates", inward_issue_key="PROJ-2", outward_issue_key="PROJ-1"
        )

        mock_atlassian_jira.post.assert_called_once_with(
            "rest/api/3/issueLink",
            data={
                "type": {"name": "Relates"},
                "inwardIssue": {"key": "PROJ-2"},
                "outwardIssue": {"key": "PROJ-1"},
            },
        )
