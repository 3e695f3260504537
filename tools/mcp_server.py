# =============================================================================
# tools/mcp_server.py  -  FastMCP Server (the RPC surface)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server that speaks MCP over stdio.  It holds no tool
#   logic of its own; it only connects two things that already exist:
#     - tools/registry.py    the catalog returned by tools/list
#     - tools/dispatcher.py  the handler + envelope for tools/call
#
# HOW IT WORKS (the flow):
#   1. The MCP client sends tools/call {name, arguments}
#   2. FastMCP routes it to the RegistryTool registered under that name
#   3. RegistryTool.run() hands the raw arguments to call_tool()
#   4. call_tool() returns a ResultEnvelope (it never raises)
#   5. The envelope goes back as-is: text content, plus isError: true when
#      the envelope is an error.  Nothing is raised into FastMCP, so a 404
#      from OpenAlex is logged once (by the dispatcher), not as a traceback.
#
# UNKNOWN TOOL NAMES:
#   FastMCP answers a name it has no Tool for by itself, before any
#   RegistryTool runs.  UnknownToolMiddleware catches that case and hands
#   the call to call_tool() as well, so the client gets the same
#   "Error: Unknown tool: <name>" text the dispatcher produces.
#
# WHY NOT @mcp.tool() ON PYTHON FUNCTIONS?
#   FastMCP would derive each input schema from a function signature.  Our
#   schemas are data (eleven tools, seven of them identical apart from the
#   endpoint), so each registry entry becomes a Tool with an explicit
#   `parameters` schema instead.
#
# RUNNING THIS SERVER:
#   python main.py                 (loads .env first; preferred)
#   python -m tools.mcp_server     (environment only)
# =============================================================================

import logging
import sys
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from core.config import Settings
from core.models import ResultEnvelope
from tools.dispatcher import call_tool
from tools.registry import list_tools

SERVER_NAME = "openalex-mcp"

SERVER_INSTRUCTIONS = (
    "Search and retrieve records from OpenAlex, the open catalog of scholarly "
    "works, authors, sources, institutions, topics, publishers and funders. "
    "Use get_filterable_fields to discover filter names before building a "
    "`filter` expression, and view='summary' on search_works for compact results."
)


def configure_logging(level: str = "INFO") -> None:
    """Send all log output to STDERR; STDOUT is the MCP message stream."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class EnvelopeResult(ToolResult):
    """A ToolResult that keeps the envelope's error flag on the wire."""

    def __init__(self, envelope: ResultEnvelope):
        super().__init__(
            content=[TextContent(type="text", text=block.text) for block in envelope.content]
        )
        self.is_error = envelope.is_error

    def to_mcp_result(self):
        if not self.is_error:
            return super().to_mcp_result()
        return CallToolResult(content=self.content, isError=True)


class RegistryTool(Tool):
    """A FastMCP tool whose schema comes from a registry entry."""

    settings: Any = Field(default=None, exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return EnvelopeResult(call_tool(self.name, arguments, self.settings))


class UnknownToolMiddleware(Middleware):
    """Route tools/call for names FastMCP doesn't know through call_tool()."""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def on_call_tool(self, context: MiddlewareContext, call_next) -> ToolResult:
        try:
            return await call_next(context)
        except NotFoundError:
            params = context.message
            return EnvelopeResult(call_tool(params.name, params.arguments, self.settings))


def build_server(settings: Optional[Settings] = None) -> FastMCP:
    """Create the FastMCP server with one tool per registry entry.

    Args:
        settings: Process defaults; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
    mcp.add_middleware(UnknownToolMiddleware(settings))
    for descriptor in list_tools():
        mcp.add_tool(
            RegistryTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.input_schema(),
                settings=settings,
            )
        )
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    _settings = Settings.from_env()
    configure_logging(_settings.log_level)
    build_server(_settings).run()
