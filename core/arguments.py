# =============================================================================
# core/arguments.py  -  Lenient Argument Normalization
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the untyped "arguments" mapping from a tool call into a typed
#   SearchQuery, or raises InvalidArgumentError.
#
# THE RULES:
#   query        -> missing becomes "", anything else becomes str(value).
#                   An empty result is rejected.
#   max_results  -> anything that is not a usable number falls back to 5:
#                   missing, bools, unparseable strings, NaN, infinities,
#                   and values that truncate to zero.  Numeric strings
#                   ("3", " 7 ") are accepted.  No bounds are enforced.
#
# Each rule is its own function so it can be tested on its own.
# =============================================================================

import math
from typing import Any, Mapping

from core.errors import InvalidArgumentError
from core.models import DEFAULT_MAX_RESULTS, SearchQuery


def coerce_query(value: Any) -> str:
    """Coerce a raw ``query`` argument to a string ("" when missing)."""
    if value is None:
        return ""
    return str(value)


def coerce_max_results(value: Any, default: int = DEFAULT_MAX_RESULTS) -> int:
    """Coerce a raw ``max_results`` argument to an int, or return ``default``."""
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        return default

    if math.isnan(number) or math.isinf(number):
        return default

    return int(number) or default


def parse_search_query(arguments: Mapping[str, Any] | None) -> SearchQuery:
    """Normalize deep_search arguments into a SearchQuery.

    Raises:
        InvalidArgumentError: if ``query`` is missing or empty after coercion.
    """
    arguments = arguments or {}
    query = coerce_query(arguments.get("query"))
    if not query:
        raise InvalidArgumentError("Search query is required", argument="query")

    return SearchQuery(
        query=query,
        max_results=coerce_max_results(arguments.get("max_results")),
    )
