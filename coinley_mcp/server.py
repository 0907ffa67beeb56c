# =============================================================================
# coinley_mcp/server.py  -  FastMCP server (the transport binding)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds a FastMCP server that advertises the Tool Catalog and forwards
#   every tool call to the ToolDispatcher.  There is no business logic
#   here; see coinley/ for that.
#
# HOW IT WORKS (the flow):
#   1. The agent asks for the tool list → FastMCP returns one entry per
#      ToolDefinition, with the catalog's JSON schema as inputSchema.
#   2. The agent calls a tool by name → FastMCP routes it to CatalogTool.run
#   3. CatalogTool.run hands the raw arguments to the dispatcher (in a
#      worker thread, since the HTTP client blocks)
#   4. Success → one text block.  Error envelope → ToolError, which the
#      protocol layer returns with isError: true and the same text.
#
# REGISTRATION:
#   Input schemas are the catalog's JSON data, not derived from Python
#   signatures, and arguments reach the dispatcher untouched.  Each catalog
#   entry is registered as an explicit Tool object.
#
# RUNNING THIS SERVER:
#   a) coinley-mcp                        (console script)
#   b) python -m coinley_mcp.server
#   Both speak MCP over stdio.
# =============================================================================

import asyncio
import json
import logging
import sys
from typing import Any, Optional

import mcp.types as mcp_types
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from pydantic import PrivateAttr

from coinley import __version__
from coinley.catalog import list_tools
from coinley.dispatcher import ToolDispatcher
from coinley.models import ToolCallResponse, ToolDefinition
from coinley.settings import Settings

SERVER_NAME = "coinley-mcp"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout IS the MCP transport.  A stray log line on
# stdout would corrupt the JSON-RPC stream.
#
# Colors: CYAN for incoming calls, YELLOW for status, GREEN for responses.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("coinley_mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, response: ToolCallResponse) -> ToolCallResponse:
    """Log the envelope as compact JSON in GREEN, then return it."""
    compact = json.dumps(response.to_dict(), separators=(",", ":"), ensure_ascii=False)
    logger.info(f"{_GREEN}  ← {tool_name} response: {compact}{_RESET}")
    return response


# =============================================================================
# CatalogTool - one registered tool per catalog entry
# =============================================================================
class CatalogTool(Tool):
    """A FastMCP tool whose schema comes from the catalog and whose
    execution is delegated to a ToolDispatcher."""

    _dispatcher: ToolDispatcher = PrivateAttr()

    @classmethod
    def from_definition(
        cls, definition: ToolDefinition, dispatcher: ToolDispatcher
    ) -> "CatalogTool":
        tool = cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema,
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments or {})
        response = await asyncio.to_thread(self._dispatcher.dispatch, self.name, arguments)
        _log_response(self.name, response)

        if response.is_error:
            _log_status("returning error envelope")
            raise ToolError(response.text)
        return ToolResult(
            content=[
                mcp_types.TextContent(type="text", text=item.text)
                for item in response.content
            ]
        )


# =============================================================================
# Server construction
# =============================================================================
# Explicit wiring: the caller owns the dispatcher, the server owns the tools.
# Nothing is registered at import time.
# =============================================================================
def create_server(dispatcher: Optional[ToolDispatcher] = None) -> FastMCP:
    dispatcher = dispatcher or ToolDispatcher()
    server = FastMCP(
        SERVER_NAME,
        version=__version__,
        instructions=(
            "Crypto deposit payments through the Coinley API. Use read_merchant_config "
            "to discover apiBaseUrl and publicKey from a merchant page, list_networks "
            "to pick a network, create_deposit_payment to get a deposit address, then "
            "poll get_payment_status with the returned id."
        ),
    )
    for definition in list_tools():
        server.add_tool(CatalogTool.from_definition(definition, dispatcher))
    return server


def main() -> None:
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    _log_status(f"starting {SERVER_NAME} (http timeout: {settings.http_timeout})")
    create_server(ToolDispatcher(settings=settings)).run()


if __name__ == "__main__":
    main()
