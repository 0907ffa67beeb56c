# =============================================================================
# coinley/__init__.py
# =============================================================================
# This package contains ALL the decision logic of the Coinley MCP adapter.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  The catalog,
#   the dispatcher and the meta-tag discovery are plain Python - you can
#   drive them from a REPL or a unit test without any protocol machinery.
#
# The MCP server (coinley_mcp/) is just the wiring; this is the engine.
# =============================================================================

from coinley.catalog import list_tools
from coinley.dispatcher import ToolDispatcher
from coinley.models import ToolCallResponse, ToolDefinition, ToolName

__version__ = "0.1.0"

__all__ = [
    "ToolCallResponse",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolName",
    "list_tools",
]
