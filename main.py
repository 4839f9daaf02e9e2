# =============================================================================
# main.py  |  Entry Point for the DC Comics MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py            (or the installed "dc-comics-mcp" script)
#
# WHAT HAPPENS:
#   1. .env is loaded (COMIC_VINE_API_KEY, COMIC_VINE_API_BASE, ...)
#   2. The configuration is read once; missing values stop the process here
#   3. The FastMCP server starts on stdio and waits for tool calls
#
# HOOKING IT UP TO A CLIENT (e.g. Claude Desktop's config):
#   "dc-comics": {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from core.errors import ConfigurationError


def main() -> None:
    # Load environment variables from .env BEFORE the configuration is read.
    load_dotenv()

    from tools.mcp_server import serve

    try:
        serve()
    except ConfigurationError as e:
        logging.error(f"Fatal: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
