"""Base client module for Jira API interactions."""

import logging
from typing import Any

from atlassian import Jira

from .config import JiraConfig

logger = logging.getLogger("mcp-jira.jira")

API_V3 = "rest/api/3"


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ValueError: If configuration is missing from the environment.
        """
        self.config = config if config is not None else JiraConfig.from_env()

        self.jira = Jira(
            url=self.config.base_url,
            username=self.config.username,
            password=self.config.api_token,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
        )

    @staticmethod
    def _api3(path: str) -> str:
        return f"{API_V3}/{path.lstrip('/')}"

    def _get_api3(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a REST API v3 resource."""
        return self.jira.get(self._api3(path), params=params)

    def _post_api3(self, path: str, data: dict[str, Any] | None = None) -> Any:
        """POST a JSON body to a REST API v3 resource."""
        return self.jira.post(self._api3(path), data=data)

    def _put_api3(self, path: str, data: dict[str, Any] | None = None) -> Any:
        """PUT a JSON body to a REST API v3 resource."""
        return self.jira.put(self._api3(path), data=data)

    @staticmethod
    def _expect_dict(response: Any, operation: str) -> dict[str, Any]:
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from {operation}: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)
        return response
