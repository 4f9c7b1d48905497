# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the Capability Registry over MCP.  Every ToolDescriptor in
#   core/registry.py becomes one FastMCP tool whose input schema is the
#   descriptor's JSON Schema, verbatim.  Calls are forwarded to the
#   InvocationHandler from core/handler.py.
#
# HOW IT WORKS (the flow):
#   1. The host lists tools      -> FastMCP answers from the registered tools
#   2. The host calls a tool     -> RegistryTool.run() builds a ToolCallRequest
#   3. The handler does the work -> one Linkup search, JSON-serialized
#   4. The result goes back      -> a single MCP TextContent block
#
# ERRORS:
#   Adapter errors (core/errors.py) are re-raised as fastmcp ToolError with
#   the same message.  FastMCP reports those to the host as isError results
#   and keeps serving.  Unknown tool names never reach us: FastMCP rejects
#   them before dispatch.
#
# RUNNING THIS SERVER:
#   Build it with create_server(handler) and call .run() - stdio is the
#   default transport.  main.py does exactly that.
# =============================================================================

import json
import logging
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from core.config import DEFAULT_SERVER_NAME
from core.errors import DeepSearchError
from core.handler import InvocationHandler
from core.models import ToolCallRequest, ToolCallResult, ToolDescriptor

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the host over STDOUT.
# Anything written to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response payloads
#     - YELLOW for intermediate status messages
#     - RED for rejected calls
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Errors
_RESET = "\033[0m"     # Reset to default terminal color

# Response bodies can be large; only the head is logged.
_MAX_LOGGED_RESPONSE = 500

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_error(tool_name: str, error: DeepSearchError) -> None:
    """Log a rejected tool call with its error type in RED."""
    logger.error(f"{_RED}  ✗ {tool_name} failed [{error.error_type}]: {error.message}{_RESET}")


def _log_response(tool_name: str, result: ToolCallResult) -> ToolCallResult:
    """Log the tool response as compact JSON in GREEN, then return it."""
    body = json.dumps(result.to_dict(), separators=(",", ":"), ensure_ascii=False)
    if len(body) > _MAX_LOGGED_RESPONSE:
        body = body[:_MAX_LOGGED_RESPONSE] + f"... ({len(body)} chars)"
    logger.info(f"{_GREEN}  ← {tool_name} response: {body}{_RESET}")
    return result


# =============================================================================
# RegistryTool - one registry descriptor, served by FastMCP
# =============================================================================
# FastMCP normally derives a tool's schema from a Python function signature.
# Here the schema is already written down in core/registry.py and the
# arguments are coerced leniently by core/arguments.py, so we subclass Tool
# and hand FastMCP the raw schema instead.
# =============================================================================
class RegistryTool(Tool):
    """A FastMCP tool that forwards calls to an InvocationHandler."""

    _handler: InvocationHandler = PrivateAttr()

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, handler: InvocationHandler) -> "RegistryTool":
        wire = descriptor.to_dict()
        tool = cls(
            name=wire["name"],
            description=wire["description"],
            parameters=wire["inputSchema"],
        )
        tool._handler = handler
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        arguments = arguments or {}
        _log_request(self.name, arguments)

        try:
            result = await self._handler.call(ToolCallRequest(tool_name=self.name, arguments=arguments))
        except DeepSearchError as exc:
            _log_error(self.name, exc)
            raise ToolError(exc.message) from exc

        _log_status(f"Returning {len(result.content)} content block(s)")
        _log_response(self.name, result)
        return ToolResult(
            content=[TextContent(type="text", text=block.text) for block in result.content]
        )


def create_server(handler: InvocationHandler, name: str = DEFAULT_SERVER_NAME) -> FastMCP:
    """Create a FastMCP server exposing every tool the handler knows about."""
    mcp = FastMCP(name)
    for descriptor in handler.list_tools():
        mcp.add_tool(RegistryTool.from_descriptor(descriptor, handler))
    return mcp
