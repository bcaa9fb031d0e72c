"""Module for Jira search operations.

Jira Cloud's enhanced JQL search (``POST /rest/api/3/search/jql``) pages with
an opaque ``nextPageToken`` and reports no total. Offset paging is emulated by
walking pages until ``start_at + max_results`` issues are collected, and the
total comes from ``POST /rest/api/3/search/approximate-count``.
"""

import logging
import re
from typing import Any

from requests.exceptions import RequestException

from ..models.jira import JiraSearchResult
from ..utils.decorators import handle_auth_errors
from .client import JiraClient

logger = logging.getLogger("mcp-jira.jira")

MAX_PAGE_SIZE = 100
ORDER_BY_PATTERN = re.compile(r"\s*\bORDER\s+BY\b.*$", re.IGNORECASE | re.DOTALL)


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    @handle_auth_errors("Jira API")
    def search_issues(
        self,
        jql: str,
        fields: list[str] | tuple[str, ...],
        start_at: int = 0,
        max_results: int = 50,
        with_total: bool = False,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            jql: JQL query string (e.g., "status = Open ORDER BY created DESC")
            fields: Fields to return for each issue
            start_at: Index of the first issue to return
            max_results: Maximum number of issues to return
            with_total: When True, also fetch the approximate match count

        Returns:
            JiraSearchResult with the requested slice of issues

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: Other HTTP errors from the Jira API
        """
        wanted = start_at + max_results
        request_body: dict[str, Any] = {
            "jql": jql,
            "fields": list(fields),
            "maxResults": min(wanted, MAX_PAGE_SIZE),
        }

        issues: list[dict[str, Any]] = []
        while len(issues) < wanted:
            response = self._expect_dict(
                self._post_api3("search/jql", data=request_body), "enhanced search"
            )
            issues.extend(response.get("issues") or [])

            next_token = response.get("nextPageToken")
            if not next_token or not response.get("issues"):
                break
            request_body["nextPageToken"] = next_token
            request_body["maxResults"] = min(wanted - len(issues), MAX_PAGE_SIZE)

        logger.debug(
            f"Search '{jql}' fetched {len(issues)} issues for slice "
            f"{start_at}..{wanted}"
        )

        return JiraSearchResult.from_api_response(
            {
                "issues": issues[start_at:wanted],
                "total": self.count_issues(jql) if with_total else None,
                "startAt": start_at,
                "maxResults": max_results,
            }
        )

    def count_issues(self, jql: str) -> int | None:
        """
        Get the approximate number of issues matching a JQL query.

        Returns:
            The count, or None if Jira cannot provide it
        """
        count_jql = ORDER_BY_PATTERN.sub("", jql).strip()
        if not count_jql:
            return None

        try:
            response = self._post_api3("search/approximate-count", data={"jql": count_jql})
        except RequestException as e:
            logger.warning(f"Could not count issues for '{count_jql}': {e}")
            return None

        if isinstance(response, dict) and isinstance(response.get("count"), int):
            return response["count"]
        return None
