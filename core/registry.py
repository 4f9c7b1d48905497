# =============================================================================
# core/registry.py  -  Capability Registry
# =============================================================================
#
# The static list of tools this adapter exposes.  There is exactly one:
# deep_search.  Listing tools is pure data - no I/O, no failure modes.
#
# The description is what the host's model reads to decide WHEN to call the
# tool, so it says what the tool returns, not how it works.
# =============================================================================

from core.models import DEFAULT_MAX_RESULTS, ToolDescriptor

DEEP_SEARCH = "deep_search"


DEEP_SEARCH_TOOL = ToolDescriptor(
    name=DEEP_SEARCH,
    description="Perform a deep web search using LinkUp API",
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "minLength": 1,
                "description": "Search query",
            },
            "max_results": {
                "type": "number",
                "default": DEFAULT_MAX_RESULTS,
                "description": "Maximum number of results to return",
            },
        },
        "required": ["query"],
    },
)

_TOOLS: tuple[ToolDescriptor, ...] = (DEEP_SEARCH_TOOL,)


def list_tools() -> list[ToolDescriptor]:
    """Return every registered tool, in registration order."""
    return list(_TOOLS)


def get_tool(name: str) -> ToolDescriptor | None:
    """Look up a tool by name, or None if it is not registered."""
    for tool in _TOOLS:
        if tool.name == name:
            return tool
    return None
