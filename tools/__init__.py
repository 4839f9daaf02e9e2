# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP-facing layer.
#
#   registry.py      → which tools exist, their argument models and handlers
#   mcp_server.py    → FastMCP wrappers around the registry (logging, errors)
#   instructions.py  → the instructions block sent to connecting clients
#
# Tools do NOT contain Comic Vine logic; that lives in core/.
# =============================================================================
