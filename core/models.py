# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the adapter)
# =============================================================================
#
# These dataclasses define the shape of everything that crosses the adapter:
#
#   ToolDescriptor   -> what the host sees when it lists tools
#   ToolCallRequest  -> what the host sends when it calls a tool
#   ToolCallResult   -> what we send back (a list of content blocks)
#   SearchQuery      -> the normalized, typed form of the tool arguments
#   SearchRequest    -> the fixed request shape handed to the Linkup client
#
# None of them outlive a single request/response exchange, except the
# descriptors, which are defined once at import time and never change.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Mapping


# Linkup request constants.  The upstream call shape never varies.
DEPTH_DEEP = "deep"
OUTPUT_SOURCED_ANSWER = "sourcedAnswer"

DEFAULT_MAX_RESULTS = 5


# -----------------------------------------------------------------------------
# ToolDescriptor - a tool as advertised to the host
# -----------------------------------------------------------------------------
# input_schema is plain JSON Schema.  It goes over the wire verbatim as the
# tool's "inputSchema", so keep it JSON-serializable.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """A named, schema-described tool the host can invoke."""

    name: str                          # Unique, stable identifier
    description: str                   # Shown to the host's model
    input_schema: Mapping[str, Any]    # JSON Schema for the arguments

    def to_dict(self) -> dict:
        """Render the descriptor in MCP wire shape."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": dict(self.input_schema),
        }


@dataclass
class ToolCallRequest:
    """One tool invocation as received from the host."""

    tool_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Hosts may omit "arguments" entirely.
        if self.arguments is None:
            self.arguments = {}


@dataclass(frozen=True)
class ContentBlock:
    """A single tagged payload inside a tool result."""

    text: str
    type: str = "text"


@dataclass
class ToolCallResult:
    """The response envelope for a successful tool call."""

    content: list[ContentBlock] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolCallResult":
        return cls(content=[ContentBlock(text=text)])

    def to_dict(self) -> dict:
        return {
            "content": [{"type": block.type, "text": block.text} for block in self.content]
        }


# -----------------------------------------------------------------------------
# SearchQuery - normalized deep_search arguments
# -----------------------------------------------------------------------------
# Produced by core/arguments.py from the loosely-typed arguments mapping.
# max_results is advisory: it is logged but never used to truncate results.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchQuery:
    """Typed form of the deep_search arguments."""

    query: str
    max_results: int = DEFAULT_MAX_RESULTS


@dataclass(frozen=True)
class SearchRequest:
    """The request handed to the Linkup client: deep, sourced, no images."""

    query: str
    depth: str = DEPTH_DEEP
    output_type: str = OUTPUT_SOURCED_ANSWER
    include_images: bool = False

    @classmethod
    def from_query(cls, search_query: SearchQuery) -> "SearchRequest":
        return cls(query=search_query.query)

    def as_kwargs(self) -> dict:
        return {
            "query": self.query,
            "depth": self.depth,
            "output_type": self.output_type,
            "include_images": self.include_images,
        }
