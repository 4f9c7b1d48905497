# =============================================================================
# main.py  -  Entry Point for the Deep Search MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the installed `deep-search-mcp` script)
#
# WHAT HAPPENS:
#   1. Loads .env into the process environment
#   2. Reads settings - LINKUP_API_KEY is required (core/config.py)
#   3. Creates ONE LinkupClient for the lifetime of the process
#   4. Hands it to the InvocationHandler (core/handler.py)
#   5. Builds the FastMCP server around the handler (tools/mcp_server.py)
#   6. Serves MCP over stdin/stdout until the host disconnects
#
# EXIT CODES:
#   0 -> the host closed the session normally
#   1 -> missing/invalid configuration, or the server crashed
#
# Nothing here prints to stdout: stdout belongs to the MCP transport.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env file (LINKUP_API_KEY, etc.)
# This must happen BEFORE load_settings() reads os.environ.
load_dotenv()

from linkup import LinkupClient

from core.config import load_settings
from core.errors import ConfigurationError
from core.handler import InvocationHandler
from tools.mcp_server import create_server

logger = logging.getLogger("deep_search")


def main() -> int:
    """Start the deep search MCP server and block until it stops."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc.message)
        return 1

    client = LinkupClient(api_key=settings.api_key)
    handler = InvocationHandler(client, timeout=settings.timeout_seconds)
    server = create_server(handler, name=settings.server_name)

    logger.info("Starting %s on stdio (timeout=%s)", settings.server_name, settings.timeout_seconds)
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Server error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
