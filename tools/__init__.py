# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP translation layer.  tools/mcp_server.py wraps the registry and the
# invocation handler from core/ in a FastMCP server:
#
#   - registry descriptors  -> FastMCP tools with the same JSON Schema
#   - handler results       -> MCP TextContent blocks
#   - adapter errors        -> fastmcp ToolError (isError results)
#
# No search logic lives here.
# =============================================================================
