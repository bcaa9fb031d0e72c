"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass, field


def parse_custom_field_names(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated list of custom field names, dropping blanks."""
    if not raw:
        return ()
    return tuple(name.strip() for name in raw.split(",") if name.strip())


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Authentication is basic auth with an account email and an API token, as
    required by the Jira Cloud REST API v3.
    """

    url: str  # Base URL for Jira
    username: str  # Account email
    api_token: str  # API token
    ssl_verify: bool = True  # Whether to verify SSL certificates
    custom_fields: tuple[str, ...] = field(default_factory=tuple)  # Highlighted custom field names

    @property
    def base_url(self) -> str:
        """The Jira URL without a trailing slash."""
        return self.url.rstrip("/")

    def browse_url(self, issue_key: str) -> str:
        """Build the browser URL of an issue."""
        return f"{self.base_url}/browse/{issue_key}"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        ``JIRA_HOST`` and ``JIRA_EMAIL`` are accepted as fallbacks for
        ``JIRA_URL`` and ``JIRA_USERNAME``. A host given without a scheme is
        assumed to be HTTPS.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing
        """
        url = cls.get_url()
        username = os.getenv("JIRA_USERNAME") or os.getenv("JIRA_EMAIL")
        api_token = os.getenv("JIRA_API_TOKEN")

        match (bool(username), bool(api_token)):
            case (True, True):
                pass
            case (False, True):
                msg = "Jira authentication requires JIRA_USERNAME (or JIRA_EMAIL)"
                raise ValueError(msg)
            case (True, False):
                msg = "Jira authentication requires JIRA_API_TOKEN"
                raise ValueError(msg)
            case (False, False):
                msg = "Jira authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in {"false", "0", "no"}

        return cls(
            url=url,
            username=username,
            api_token=api_token,
            ssl_verify=ssl_verify,
            custom_fields=parse_custom_field_names(os.getenv("JIRA_CUSTOM_FIELDS")),
        )

    @staticmethod
    def get_url() -> str:
        """Get the Jira URL from environment variables.

        Returns:
            The Jira URL
        """
        url = os.getenv("JIRA_URL") or os.getenv("JIRA_HOST")
        if not url:
            error_msg = "Missing required JIRA_URL (or JIRA_HOST) environment variable"
            raise ValueError(error_msg)
        if "://" not in url:
            url = f"https://{url}"
        return url
