import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from requests.exceptions import HTTPError

from mcp_jira.exceptions import MCPJiraAuthenticationError

logger = logging.getLogger("mcp-jira.utils")


def handle_auth_errors(service_name: str = "Jira API") -> Callable:
    """
    Decorator that turns 401/403 responses from Jira into an authentication error.

    Other HTTP errors are logged and re-raised unchanged so that callers can
    report the response payload.

    Args:
        service_name: Name of the service for error logging (e.g., "Jira API").
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                if http_err.response is not None and http_err.response.status_code in [
                    401,
                    403,
                ]:
                    error_msg = (
                        f"Authentication failed for {service_name} "
                        f"({http_err.response.status_code}). "
                        "Token may be expired or invalid. Please verify credentials."
                    )
                    logger.error(error_msg)
                    raise MCPJiraAuthenticationError(error_msg) from http_err
                logger.error(
                    f"HTTP error during {func.__name__}: {http_err}", exc_info=False
                )
                raise

        return wrapper

    return decorator
