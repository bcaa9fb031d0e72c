"""Tests for the Jira filters mixin."""


def _filter(filter_id):
    return {
        "id": str(filter_id),
        "name": f"Filter {filter_id}",
        "jql": "project = PROJ",
        "viewUrl": f"https://test.atlassian.net/issues/?filter={filter_id}",
    }


class TestFiltersMixin:
    def test_single_page(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {
            "values": [_filter(1), _filter(2)],
            "isLast": True,
        }

        filters = jira_fetcher.get_filters()

        mock_atlassian_jira.get.assert_called_once_with(
            "rest/api/3/filter/search",
            params={"expand": "jql,viewUrl", "startAt": 0, "maxResults": 50},
        )
        assert [f.name for f in filters] == ["Filter 1", "Filter 2"]
        assert filters[0].jql == "project = PROJ"
        assert filters[0].view_url.endswith("filter=1")

    def test_follows_pages_until_last(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.side_effect = [
            {"values": [_filter(1), _filter(2)], "isLast": False},
            {"values": [_filter(3)], "isLast": True},
        ]

        filters = jira_fetcher.get_filters(page_size=2)

        assert [f.id for f in filters] == ["1", "2", "3"]
        second_call = mock_atlassian_jira.get.call_args_list[1]
        assert second_call.kwargs["params"]["startAt"] == 2

    def test_missing_is_last_stops(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"values": [_filter(1), _filter(2)]}

        filters = jira_fetcher.get_filters(page_size=2)

        assert len(filters) == 2
        assert mock_atlassian_jira.get.call_count == 1

    def test_short_page_stops(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"values": [_filter(1)], "isLast": False}

        assert len(jira_fetcher.get_filters(page_size=2)) == 1
        assert mock_atlassian_jira.get.call_count == 1

    def test_no_filters(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {"values": [], "isLast": True}

        assert jira_fetcher.get_filters() == []
