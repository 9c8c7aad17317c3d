from typing import Any, Dict, List, Mapping, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .actions.models import SearchClient, SearchType
from .actions.registry import get_action_registry
from .actions.search.search import search_handler
from .actions.tool_calls.get_tools import get_default_tools
from .actions.tool_calls.validation import validate_tool_args
from .api.response.response import internal_error, invalid_params
from .api.serper import SerperClient
from .config import Settings
from .errors import InvalidParamsError, SerperAPIError
from .logger import build_logging_config, log

SERVER_NAME = "serper-search-server"
TRANSPORTS = ("stdio", "http")

def get_server_info() -> Dict[str, Any]:
    return {
        "name": "Serper Search MCP Server",
        "version": __version__,
        "search_types": [search_type.value for search_type in SearchType],
        "transports": list(TRANSPORTS),
        "features": [
            "Multi-Type Search (Web, Images, Videos, News, Shopping)",
            "Multi-Transport (STDIO, HTTP/SSE)",
            "Advanced Filtering (Country, Language, Freshness, Safe Search)",
            "AI Summarization",
        ],
    }


class SearchDispatcher:
    """Routes MCP tool requests to the search pipeline."""

    def __init__(self, client: SearchClient):
        self.client = client
        self.registry = get_action_registry()

    def list_tools(self) -> List[types.Tool]:
        return list(get_default_tools())

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]]) -> List[types.TextContent]:
        """
        Validate, search and format one tool call.

        Raises:
            McpError: INVALID_PARAMS for rejected arguments or unknown tools,
                INTERNAL_ERROR for upstream and unexpected failures
        """
        try:
            validate_tool_args(name, arguments)
            text = await search_handler(self.client, self.registry[name], arguments)
        except InvalidParamsError as e:
            log.warning(f"Rejected tool call: {e}", extra={"tool": name})
            raise invalid_params(str(e)) from e
        except SerperAPIError as e:
            raise internal_error(f"Search failed: {e}") from e
        except Exception as e:
            log.error(f"Unexpected error during tool call: {e}", extra={"tool": name}, exc_info=True)
            raise internal_error(f"Search failed: {e}") from e

        log.info("Tool call completed", extra={"tool": name})
        return [types.TextContent(type="text", text=text)]


class SerperMCPServer:
    def __init__(self, settings: Settings, client: Optional[SerperClient] = None):
        self.settings = settings
        self.client = client or SerperClient(settings.SERPER_API_KEY, base_url=settings.SERPER_API_URL)
        self.dispatcher = SearchDispatcher(self.client)
        self.server = Server(SERVER_NAME, version=__version__)
        self._setup_tool_handlers()

    def _setup_tool_handlers(self) -> None:
        dispatcher = self.dispatcher

        @self.server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return dispatcher.list_tools()

        # McpError must reach the client as a JSON-RPC error, not an isError result
        async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
            content = await dispatcher.call_tool(req.params.name, req.params.arguments)
            return types.ServerResult(types.CallToolResult(content=content, isError=False))

        self.server.request_handlers[types.CallToolRequest] = call_tool

    async def run(self) -> None:
        transport = self.settings.SERPER_MCP_TRANSPORT
        log.info("Starting Serper MCP server", extra={"transport": transport, "version": __version__})
        try:
            if transport == "http":
                await self.run_http()
            else:
                await self.run_stdio()
        finally:
            await self.client.aclose()

    async def run_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            log.info("Serper MCP server running on stdio")
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())

    async def run_http(self) -> None:
        import uvicorn

        from .main import create_app

        config = uvicorn.Config(
            create_app(self),
            host=self.settings.SERPER_MCP_HOST,
            port=self.settings.SERPER_MCP_PORT,
            log_config=build_logging_config(self.settings.SERPER_MCP_LOG_LEVEL),
            log_level=self.settings.SERPER_MCP_LOG_LEVEL,
        )
        log.info(f"Serper MCP server running on http://{self.settings.SERPER_MCP_HOST}:{self.settings.SERPER_MCP_PORT}")
        await uvicorn.Server(config).serve()
