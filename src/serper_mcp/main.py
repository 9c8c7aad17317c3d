from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import Response
from mcp.server.sse import SseServerTransport

from .api.response.response import ok
from .logger import log

if TYPE_CHECKING:
    from .server import SerperMCPServer

SSE_PATH = "/sse"
MESSAGES_PATH = "/messages/"

def create_app(mcp_server: "SerperMCPServer") -> FastAPI:
    """
    HTTP front for the MCP server: clients open an event stream on `/sse` and
    post their JSON-RPC messages to `/messages/?session_id=...`.
    """
    from .server import get_server_info

    sse = SseServerTransport(MESSAGES_PATH)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("HTTP transport ready", extra={"sse_path": SSE_PATH, "messages_path": MESSAGES_PATH})
        yield
        await mcp_server.client.aclose()
        log.info("HTTP transport stopped, Serper client closed.")

    app = FastAPI(lifespan=lifespan)

    @app.get("/")
    async def root():
        return ok(get_server_info())

    @app.get(SSE_PATH)
    async def handle_sse(request: Request):
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await mcp_server.server.run(
                read_stream,
                write_stream,
                mcp_server.server.create_initialization_options(),
            )
        return Response()

    app.mount(MESSAGES_PATH, app=sse.handle_post_message)

    return app
