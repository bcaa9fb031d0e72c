"""Entry point for running the MCP Jira server with ``python -m mcp_jira``."""

from mcp_jira import main

if __name__ == "__main__":
    main()
