# =============================================================================
# core/config.py  -  Settings from the Process Environment
# =============================================================================
#
# ENVIRONMENT VARIABLES:
#   LINKUP_API_KEY           (required)  Bearer credential for the Linkup API.
#   LINKUP_TIMEOUT_SECONDS   (optional)  Upper bound on one search call.
#                                        Unset, empty, or 0 -> wait forever.
#   DEEP_SEARCH_SERVER_NAME  (optional)  MCP server identity.
#
# A .env file is honoured too: main.py calls load_dotenv() before
# load_settings() runs, so values there land in os.environ first.
# =============================================================================

import math
import os
from dataclasses import dataclass
from typing import Mapping

from core.errors import ConfigurationError

API_KEY_ENV = "LINKUP_API_KEY"
TIMEOUT_ENV = "LINKUP_TIMEOUT_SECONDS"
SERVER_NAME_ENV = "DEEP_SEARCH_SERVER_NAME"

DEFAULT_SERVER_NAME = "deep-search-mcp"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    api_key: str
    timeout_seconds: float | None = None
    server_name: str = DEFAULT_SERVER_NAME

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', timeout_seconds={self.timeout_seconds!r}, "
            f"server_name={self.server_name!r})"
        )


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from None
    if not math.isfinite(timeout) or timeout < 0:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be a positive number, got {raw!r}")
    return timeout or None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigurationError: if the API key is missing or a value is malformed.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

    return Settings(
        api_key=api_key,
        timeout_seconds=_parse_timeout(env.get(TIMEOUT_ENV)),
        server_name=env.get(SERVER_NAME_ENV) or DEFAULT_SERVER_NAME,
    )
