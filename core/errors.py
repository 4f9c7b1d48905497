# =============================================================================
# core/errors.py  -  Adapter Error Taxonomy
# =============================================================================
#
# Every failure the adapter can report is one of four kinds:
#
#   ConfigurationError    -> startup only; the process exits before serving
#   UnknownToolError      -> the host asked for a tool we never registered
#   InvalidArgumentError  -> the arguments could not be normalized
#   UpstreamError         -> the Linkup call failed (message kept verbatim)
#
# Only the last three happen per request.  The MCP server layer turns them
# into protocol-level tool errors; the process keeps serving afterwards.
# =============================================================================


class DeepSearchError(Exception):
    """Base class for all adapter errors."""

    error_type = "deep_search_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(DeepSearchError):
    """Required settings are missing or malformed at startup."""

    error_type = "configuration_error"


class UnknownToolError(DeepSearchError):
    """The requested tool name is not in the capability registry."""

    error_type = "unknown_tool"

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidArgumentError(DeepSearchError):
    """A tool argument failed validation after coercion."""

    error_type = "invalid_argument"

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument


class UpstreamError(DeepSearchError):
    """The external search call failed or timed out."""

    error_type = "upstream_error"

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error
