"""Tests for the Jira users mixin."""

import pytest

from tests.utils.factories import JiraUserFactory


class TestUsersMixin:
    def test_find_users(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = [
            JiraUserFactory.create("acc-1", "Jane Doe"),
            JiraUserFactory.create("acc-2", "Bot", email=None, active=False),
            JiraUserFactory.create("acc-3", "No Flag", active=None),
        ]

        users = jira_fetcher.find_users("j", start_at=10, max_results=5)

        mock_atlassian_jira.get.assert_called_once_with(
            "rest/api/3/user/search",
            params={"query": "j", "startAt": 10, "maxResults": 5},
        )
        assert [u.account_id for u in users] == ["acc-1", "acc-2", "acc-3"]
        assert [u.active for u in users] == [True, False, True]
        assert users[0].email == "test@example.com"
        assert users[1].email is None

    def test_find_users_unexpected_payload(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"values": []}

        with pytest.raises(TypeError):
            jira_fetcher.find_users("j")

    def test_assign_issue(self, jira_fetcher, mock_atlassian_jira):
        jira_fetcher.assign_issue("PROJ-1", "acc-1")

        mock_atlassian_jira.put.assert_called_once_with(
            "rest/api/3/issue/PROJ-1/assignee", data={"accountId": "acc-1"}
        )
