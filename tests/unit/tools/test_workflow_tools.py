"""Tests for the multi-issue tool handlers."""

import pytest

from mcp_jira.exceptions import ToolInputError
from mcp_jira.models.jira import JiraStatus, JiraTransition, JiraUser
from mcp_jira.tools import workflow
from tests.utils.mocks import make_http_error


def test_merge_labels_keeps_order_without_repeats():
    assert workflow.merge_labels(["a", "b"], ["b", "c", "c"]) == ["a", "b", "c"]


class TestAddLabels:
    def test_merges_with_existing_labels(self, app_context, mock_jira):
        mock_jira.get_issue_labels.side_effect = [["existing"], []]

        response = workflow.add_labels(
            app_context, {"issueKeys": ["PROJ-1", "PROJ-2"], "labels": ["new", "existing"]}
        )

        assert mock_jira.edit_issue.call_args_list[0].args == (
            "PROJ-1",
            {"labels": ["existing", "new"]},
        )
        assert mock_jira.edit_issue.call_args_list[1].args == (
            "PROJ-2",
            {"labels": ["new", "existing"]},
        )
        assert response.is_error is False
        assert response.text == (
            "Successfully added labels to 2 of 2 issues:\n"
            "PROJ-1: labels now existing, new\n"
            "PROJ-2: labels now new, existing"
        )

    def test_partial_failure(self, app_context, mock_jira):
        mock_jira.get_issue_labels.side_effect = [
            [],
            make_http_error(404, {"errorMessages": ["Issue does not exist"]}),
            ["x"],
        ]

        response = workflow.add_labels(
            app_context, {"issueKeys": ["P-1", "P-2", "P-3"], "labels": ["l"]}
        )

        assert mock_jira.edit_issue.call_count == 2
        assert response.is_error is False
        assert "Successfully added labels to 2 of 3 issues:" in response.text
        assert "Failed to add labels to 1 issues:\nP-2: 404 Client Error" in response.text
        assert "Issue does not exist" in response.text

    def test_empty_keys(self, app_context, mock_jira):
        with pytest.raises(ToolInputError, match="issueKeys must be a non-empty array"):
            workflow.add_labels(app_context, {"issueKeys": [], "labels": ["l"]})
        mock_jira.get_issue_labels.assert_not_called()

    def test_empty_labels(self, app_context):
        with pytest.raises(ToolInputError, match="labels must be a non-empty array"):
            workflow.add_labels(app_context, {"issueKeys": ["P-1"], "labels": []})


class TestTransitionIssues:
    def test_numeric_id(self, app_context, mock_jira):
        response = workflow.transition_issues(
            app_context, {"issueKeys": ["P-1", "P-2"], "transitionId": "31"}
        )

        mock_jira.get_transitions.assert_not_called()
        assert [c.args for c in mock_jira.transition_issue.call_args_list] == [
            ("P-1", "31"),
            ("P-2", "31"),
        ]
        assert response.text == (
            "Successfully transitioned 2 of 2 issues:\n"
            "P-1: transitioned with transition 31\n"
            "P-2: transitioned with transition 31"
        )

    def test_transition_by_name(self, app_context, mock_jira):
        mock_jira.get_transitions.return_value = [
            JiraTransition(id="11", name="Start Progress"),
            JiraTransition(id="31", name="Done", to_status=JiraStatus(name="Done")),
        ]

        workflow.transition_issues(
            app_context, {"issueKeys": ["P-1"], "transitionId": "done"}
        )

        mock_jira.transition_issue.assert_called_once_with("P-1", "31")

    def test_unknown_name_fails_per_issue(self, app_context, mock_jira):
        mock_jira.get_transitions.return_value = [JiraTransition(id="11", name="Start")]

        response = workflow.transition_issues(
            app_context, {"issueKeys": ["P-1"], "transitionId": "Close"}
        )

        assert response.is_error is True
        assert response.text == (
            "Failed to transition 1 issues:\nP-1: No transition named 'Close' is available"
        )

    def test_all_failed(self, app_context, mock_jira):
        mock_jira.transition_issue.side_effect = make_http_error(400)

        response = workflow.transition_issues(
            app_context, {"issueKeys": ["P-1", "P-2"], "transitionId": "31"}
        )

        assert response.is_error is True
        assert response.text.startswith("Failed to transition 2 issues:")


class TestAssignIssue:
    def test_assign(self, app_context, mock_jira):
        mock_jira.find_users.return_value = [
            JiraUser(account_id="acc-1", display_name="Jane Doe")
        ]

        response = workflow.assign_issue(
            app_context, {"issueKeys": ["P-1", "P-2"], "assigneeDisplayName": "Jane"}
        )

        assert [c.args for c in mock_jira.assign_issue.call_args_list] == [
            ("P-1", "acc-1"),
            ("P-2", "acc-1"),
        ]
        assert response.text == (
            "Successfully assigned 2 of 2 issues to Jane Doe:\n"
            "P-1: assigned to Jane Doe\n"
            "P-2: assigned to Jane Doe"
        )

    def test_exact_match_breaks_tie(self, app_context, mock_jira):
        mock_jira.find_users.return_value = [
            JiraUser(account_id="acc-1", display_name="Jane Doe"),
            JiraUser(account_id="acc-2", display_name="Jane Doelittle"),
        ]

        workflow.assign_issue(
            app_context, {"issueKeys": ["P-1"], "assigneeDisplayName": "jane doe"}
        )

        mock_jira.assign_issue.assert_called_once_with("P-1", "acc-1")

    def test_ambiguous_user(self, app_context, mock_jira):
        mock_jira.find_users.return_value = [
            JiraUser(account_id="acc-1", display_name="Jane A"),
            JiraUser(account_id="acc-2", display_name="Jane B"),
        ]

        with pytest.raises(ToolInputError) as exc:
            workflow.assign_issue(
                app_context, {"issueKeys": ["P-1"], "assigneeDisplayName": "Jane"}
            )

        assert str(exc.value) == (
            'Error: Multiple users found with display name "Jane":\n'
            " - Jane A (AccountId: acc-1)\n"
            " - Jane B (AccountId: acc-2)\n"
            "Please be more specific or use the accountId."
        )
        mock_jira.assign_issue.assert_not_called()

    def test_no_user(self, app_context, mock_jira):
        mock_jira.find_users.return_value = []

        with pytest.raises(ToolInputError, match='No user found with display name "Ghost"'):
            workflow.assign_issue(
                app_context, {"issueKeys": ["P-1"], "assigneeDisplayName": "Ghost"}
            )

    def test_partial_failure(self, app_context, mock_jira):
        mock_jira.find_users.return_value = [JiraUser(account_id="acc-1", display_name="Jane")]
        mock_jira.assign_issue.side_effect = [None, make_http_error(403)]

        response = workflow.assign_issue(
            app_context, {"issueKeys": ["P-1", "P-2"], "assigneeDisplayName": "Jane"}
        )

        assert response.is_error is False
        assert "Successfully assigned 1 of 2 issues to Jane:\nP-1: assigned to Jane" in response.text
        assert "Failed to assign 1 issues:\nP-2:" in response.text
