# =============================================================================
# coinley_mcp/__init__.py
# =============================================================================
# The MCP "translation layer" between an agent and coinley/.
#
#   - It exposes the catalog over MCP (FastMCP, stdio transport)
#   - It forwards calls to the ToolDispatcher and maps its envelopes back
#   - It does NOT validate, build HTTP requests or parse pages; that is
#     coinley/'s job
# =============================================================================
