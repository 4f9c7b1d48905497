# =============================================================================
# core/handler.py  -  Invocation Handler
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Takes a ToolCallRequest and turns it into exactly one Linkup search:
#
#     1. Dispatch on the tool name (unknown -> UnknownToolError, no call)
#     2. Normalize arguments       (empty query -> InvalidArgumentError, no call)
#     3. Call the search client    (deep / sourcedAnswer / no images)
#     4. Serialize the result      (pretty JSON, one text content block)
#
#   Any failure in step 3 is re-raised as UpstreamError with the original
#   message.  Nothing is retried or cached.
#
# THE CLIENT HANDLE:
#   The handler never builds its own client.  main.py constructs the
#   LinkupClient once and passes it in; tests pass a fake.  Any object with
#   an ``async_search(query=, depth=, output_type=, include_images=)``
#   coroutine method will do.
# =============================================================================

import asyncio
import json
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Protocol

from core.arguments import parse_search_query
from core.errors import UnknownToolError, UpstreamError
from core.models import SearchRequest, ToolCallRequest, ToolCallResult, ToolDescriptor
from core.registry import DEEP_SEARCH, get_tool, list_tools

logger = logging.getLogger(__name__)


class SearchClient(Protocol):
    """The slice of ``linkup.LinkupClient`` the handler relies on."""

    async def async_search(
        self,
        query: str,
        depth: str,
        output_type: str,
        include_images: bool = False,
    ) -> Any: ...


def serialize_result(result: Any) -> str:
    """Render a raw search result as indented JSON.

    Linkup returns pydantic models; dataclasses and plain JSON values are
    accepted too.
    """
    if hasattr(result, "model_dump"):
        payload = result.model_dump(mode="json")
    elif is_dataclass(result) and not isinstance(result, type):
        payload = asdict(result)
    else:
        payload = result
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


class InvocationHandler:
    """Dispatches tool calls to the search client.

    Args:
        client: The shared search client handle.
        timeout: Seconds to wait for the upstream call.  ``None`` waits
            indefinitely.
    """

    def __init__(self, client: SearchClient, timeout: float | None = None):
        self._client = client
        self._timeout = timeout
        self._routes = {DEEP_SEARCH: self._deep_search}

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def list_tools(self) -> list[ToolDescriptor]:
        return list_tools()

    async def call(self, request: ToolCallRequest) -> ToolCallResult:
        """Handle one tool call.

        Raises:
            UnknownToolError: the tool name is not registered.
            InvalidArgumentError: the arguments failed normalization.
            UpstreamError: the search call failed or timed out.
        """
        descriptor = get_tool(request.tool_name)
        if descriptor is None:
            raise UnknownToolError(request.tool_name)
        return await self._routes[descriptor.name](request)

    async def _deep_search(self, request: ToolCallRequest) -> ToolCallResult:
        search_query = parse_search_query(request.arguments)
        search_request = SearchRequest.from_query(search_query)
        logger.debug(
            "deep_search query=%r max_results=%d",
            search_query.query,
            search_query.max_results,
        )

        result = await self._search(search_request)
        return ToolCallResult.from_text(serialize_result(result))

    async def _search(self, search_request: SearchRequest) -> Any:
        if self._timeout is None:
            return await self._call_client(search_request)
        # Client failures are already UpstreamError here, so only our own
        # deadline can surface as TimeoutError.
        try:
            return await asyncio.wait_for(self._call_client(search_request), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise UpstreamError(
                f"Search request timed out after {self._timeout:g}s", original_error=exc
            ) from exc

    async def _call_client(self, search_request: SearchRequest) -> Any:
        try:
            return await self._client.async_search(**search_request.as_kwargs())
        except Exception as exc:
            raise UpstreamError(str(exc) or type(exc).__name__, original_error=exc) from exc
