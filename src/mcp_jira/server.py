import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from mcp.server import Server
from mcp.types import CallToolResult, Tool

from .context import AppContext
from .exceptions import ToolInputError
from .jira import JiraFetcher
from .jira.config import JiraConfig
from .logging_config import log_operation, setup_logger
from .tools import fail, format_jira_error, registry
from .utils.logging import log_config_param

logger = setup_logger("mcp-jira")


def create_app_context() -> AppContext:
    """
    Build the application context from the environment.

    A missing or invalid Jira configuration is logged and yields a context
    without a Jira client, so the server still starts and reports the problem
    on every tool call.
    """
    try:
        config = JiraConfig.from_env()
    except ValueError as e:
        logger.error(f"Jira is not configured: {e}")
        return AppContext()

    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Username", config.username)
    log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))
    log_config_param(
        logger, "Jira", "Custom Fields", ", ".join(config.custom_fields) or None
    )

    jira = JiraFetcher(config=config)
    custom_fields = jira.load_custom_field_map(config.custom_fields)
    return AppContext(jira=jira, config=config, custom_fields=custom_fields)


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Initialize and clean up application resources."""
    with log_operation(logger, "server_startup"):
        logger.info("Starting MCP Jira server")
        app_context = await asyncio.to_thread(create_app_context)
        logger.info(f"Serving {len(registry)} tools")

    try:
        yield app_context
    finally:
        logger.info("Shutting down MCP Jira server")


app = Server("mcp-jira", lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available Jira tools."""
    return registry.list_tools()


@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    """
    Dispatch a tool call to its handler.

    Every failure is returned as an error result; nothing raised by a handler
    escapes to the transport.
    """
    spec = registry.get(name)
    if spec is None:
        logger.warning(f"Unknown tool requested: {name}")
        return fail(f"Unknown tool: {name}").to_result()

    ctx: AppContext = app.request_context.lifespan_context
    if ctx is None or ctx.jira is None:
        return fail(
            "Error: Jira is not configured. Set JIRA_URL, JIRA_USERNAME and JIRA_API_TOKEN."
        ).to_result()

    with log_operation(logger, "call_tool", tool=name):
        try:
            response = await asyncio.to_thread(spec.handler, ctx, arguments or {})
        except ToolInputError as e:
            logger.info(f"Rejected {name} arguments: {e}")
            response = fail(str(e))
        except Exception as e:
            logger.error(f"{spec.error_prefix}: {e}", exc_info=True)
            response = fail(format_jira_error(spec.error_prefix, e))

    return response.to_result()


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the MCP Jira server with the specified transport."""
    if transport == "sse":
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        import uvicorn

        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # serve() instead of run() to stay in the current event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
