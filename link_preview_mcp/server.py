"""
link_preview_mcp/server.py

MCP server entry point.

Exposes:
  Tools:
    • fetch_link_preview: OpenGraph / Twitter Card / HTML metadata + favicon
    • get_page_content: Readable page text, boilerplate stripped
    • search_web: DuckDuckGo results → list of {title, url, snippet}

One httpx client is opened when the server starts and closed when the stdio
transport closes; every tool call borrows it.
"""
from __future__ import annotations

import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable

import httpx
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from .core.errors import LinkPreviewError, UnknownToolError
from .core.fetcher import build_http_client
from .tools.content import handle_get_page_content
from .tools.preview import handle_fetch_link_preview
from .tools.search import handle_search_web

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING),
    format="%(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Tool input schemas
# ---------------------------------------------------------------------------

TOOLS = [
    Tool(
        name="fetch_link_preview",
        description=(
            "Fetch OpenGraph and social metadata from a URL. Returns structured preview "
            "data including title, description, image, site name, and social card info. "
            "Useful for generating rich link previews in chats."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "The URL to fetch preview data from",
                },
            },
            "required": ["url"],
        },
    ),
    Tool(
        name="search_web",
        description=(
            "Search the web and return results. Returns titles, URLs, and snippets "
            "for quick research or link discovery."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query string",
                },
                "numResults": {
                    "type": "number",
                    "description": "Number of results to return (default 10, max 50)",
                    "default": 10,
                },
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="get_page_content",
        description=(
            "Extract clean text content from a URL. Returns the main readable text "
            "from the page, stripped of navigation and boilerplate. Useful for "
            "summarizing articles or extracting key information."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "The URL to extract content from",
                },
                "maxLength": {
                    "type": "number",
                    "description": "Maximum characters to return (default 5000)",
                    "default": 5000,
                },
            },
            "required": ["url"],
        },
    ),
]

Handler = Callable[[dict[str, Any], httpx.AsyncClient], Awaitable[Any]]

HANDLERS: dict[str, Handler] = {
    "fetch_link_preview": handle_fetch_link_preview,
    "get_page_content": handle_get_page_content,
    "search_web": handle_search_web,
}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps({"error": message}, indent=2))],
        isError=True,
    )


async def dispatch(
    name: str,
    arguments: dict[str, Any] | None,
    client: httpx.AsyncClient,
) -> CallToolResult:
    """
    Run one tool call.

    Failures never escape: they come back as ``{"error": ...}`` with
    ``isError`` set.  Plain-string results are returned as-is, anything
    else as indented JSON.
    """
    try:
        handler = HANDLERS.get(name)
        if handler is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        result = await handler(arguments or {}, client)
    except LinkPreviewError as exc:
        logger.warning("Tool %r failed: %s", name, exc)
        return _error_result(str(exc))
    except Exception as exc:
        logger.exception("Tool %r raised: %s", name, exc)
        return _error_result(str(exc) or type(exc).__name__)

    text = result if isinstance(result, str) else json.dumps(result, ensure_ascii=False, indent=2)
    return CallToolResult(content=[TextContent(type="text", text=text)])


# ---------------------------------------------------------------------------
# Server setup
# ---------------------------------------------------------------------------

@asynccontextmanager
async def _lifespan(_server: Server) -> AsyncIterator[dict[str, Any]]:
    async with build_http_client() as client:
        logger.info("HTTP client ready")
        yield {"client": client}
    logger.info("HTTP client closed")


app = Server("link-preview-mcp", lifespan=_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    return TOOLS


@app.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
    client = app.request_context.lifespan_context["client"]
    return await dispatch(name, arguments, client)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

async def _serve() -> None:
    logger.info("Starting link-preview-mcp server")
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options(),
        )


def main() -> None:
    asyncio.run(_serve())


if __name__ == "__main__":
    main()
