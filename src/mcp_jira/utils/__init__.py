"""
Utility functions for the MCP Jira server.
"""

from .date import parse_date
from .decorators import handle_auth_errors
from .logging import log_config_param, mask_sensitive

__all__ = [
    "handle_auth_errors",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
]
