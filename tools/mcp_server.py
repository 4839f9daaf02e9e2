# =============================================================================
# tools/mcp_server.py  |  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every tool in tools/registry.py over MCP.  Each function below is
#   a thin wrapper: it logs the call, hands the arguments to call_tool(), and
#   logs the result.  Validation, requests and normalization all live in the
#   registry and in core/.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (Claude Desktop, an ADK agent...) calls a tool by name
#   2. FastMCP checks the arguments against the advertised schema (built from
#      the core/arguments.py types) and calls the decorated function below
#   3. The function drops unset (None) arguments and calls call_tool()
#   4. call_tool() validates, runs the core operation, returns an envelope
#   5. Any ComicVineError becomes a ToolError the client can read
#
# RUNNING THIS SERVER:
#   a) python main.py                 (console script: dc-comics-mcp)
#   b) python -m tools.mcp_server
#   Both read COMIC_VINE_API_KEY / COMIC_VINE_API_BASE (a .env file works)
#   and refuse to start without them.
# =============================================================================

import json
import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from core.arguments import (
    CharacterId,
    CharacterName,
    DigestLimit,
    FieldList,
    Filter,
    IssueId,
    IssueName,
    IssueNumber,
    Limit,
    MovieId,
    Offset,
    PageTitle,
    PublisherId,
    Query,
    Resources,
    Sort,
    TeamId,
    VolumeId,
)
from core.config import ComicVineConfig, load_config
from core.errors import ComicVineError, ConfigurationError
from core.gateway import ComicVineClient, ComicVineGateway
from tools.instructions import SERVER_INSTRUCTIONS
from tools.registry import TOOLS, call_tool

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# A log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI colors:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages
#     - RED for errors
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Responses longer than this are cut in the log (HTML pages are large).
_MAX_LOGGED_CHARS = 2000

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logged = dict(result)
    if "html" in logged:
        logged["html"] = f"<{len(logged['html'])} chars of HTML>"
    text = json.dumps(logged, separators=(",", ":"))
    if len(text) > _MAX_LOGGED_CHARS:
        text = text[:_MAX_LOGGED_CHARS] + "..."
    logging.info(f"{_GREEN}  ← {tool_name} response: {text}{_RESET}")
    return result


# =============================================================================
# The FastMCP server instance and its Comic Vine client
# =============================================================================
mcp = FastMCP("dc-comics-mcp", instructions=SERVER_INSTRUCTIONS)

_client: ComicVineGateway | None = None


def configure(client: ComicVineGateway | None) -> None:
    """Install the client every tool call goes through."""
    global _client
    _client = client


def _run(tool_name: str, **arguments) -> dict:
    """Shared body of every tool: log, dispatch, translate errors, log."""
    _log_request(tool_name, **arguments)
    if _client is None:
        raise ToolError(f"Error processing {tool_name}: server is not configured")

    try:
        result = call_tool(
            tool_name,
            {k: v for k, v in arguments.items() if v is not None},
            _client,
        )
    except ComicVineError as e:
        logging.error(f"{_RED}  ✗ {tool_name} failed: {e}{_RESET}")
        raise ToolError(f"Error processing {tool_name}: {e}") from e

    if "results" in result:
        _log_status(
            f"{result['number_of_page_results']} of "
            f"{result['number_of_total_results']} results"
        )
    return _log_response(tool_name, result)


# =============================================================================
# Characters
# =============================================================================
# Parameter types come from core/arguments.py so the advertised JSON schema
# carries the same bounds and descriptions as the registry's models.
# =============================================================================
@mcp.tool(description=TOOLS["get_characters"].description)
def get_characters(
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
    sort: Sort = None,
    filter: Filter = None,
) -> dict:
    return _run("get_characters", field_list=field_list, limit=limit,
                offset=offset, sort=sort, filter=filter)


@mcp.tool(description=TOOLS["get_character_by_id"].description)
def get_character_by_id(character_id: CharacterId, field_list: FieldList = None) -> dict:
    return _run("get_character_by_id", character_id=character_id, field_list=field_list)


@mcp.tool(description=TOOLS["get_characters_for_issue"].description)
def get_characters_for_issue(
    issue_id: IssueId,
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
) -> dict:
    return _run("get_characters_for_issue", issue_id=issue_id, field_list=field_list,
                limit=limit, offset=offset)


# =============================================================================
# Issues
# =============================================================================
@mcp.tool(description=TOOLS["get_issues"].description)
def get_issues(
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
    sort: Sort = None,
    filter: Filter = None,
) -> dict:
    return _run("get_issues", field_list=field_list, limit=limit,
                offset=offset, sort=sort, filter=filter)


@mcp.tool(description=TOOLS["get_issue_by_id"].description)
def get_issue_by_id(issue_id: IssueId, field_list: FieldList = None) -> dict:
    return _run("get_issue_by_id", issue_id=issue_id, field_list=field_list)


@mcp.tool(description=TOOLS["get_issues_for_character"].description)
def get_issues_for_character(
    character_id: CharacterId,
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
) -> dict:
    return _run("get_issues_for_character", character_id=character_id,
                field_list=field_list, limit=limit, offset=offset)


@mcp.tool(description=TOOLS["get_issues_by_character_name"].description)
def get_issues_by_character_name(
    filter: CharacterName,
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
) -> dict:
    return _run("get_issues_by_character_name", filter=filter,
                field_list=field_list, limit=limit, offset=offset)


# =============================================================================
# Movies
# =============================================================================
@mcp.tool(description=TOOLS["get_movies"].description)
def get_movies(
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
    sort: Sort = None,
    filter: Filter = None,
) -> dict:
    return _run("get_movies", field_list=field_list, limit=limit,
                offset=offset, sort=sort, filter=filter)


@mcp.tool(description=TOOLS["get_movie_by_id"].description)
def get_movie_by_id(movie_id: MovieId, field_list: FieldList = None) -> dict:
    return _run("get_movie_by_id", movie_id=movie_id, field_list=field_list)


@mcp.tool(description=TOOLS["get_movies_by_character"].description)
def get_movies_by_character(
    filter: CharacterName,
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
) -> dict:
    return _run("get_movies_by_character", filter=filter,
                field_list=field_list, limit=limit, offset=offset)


# =============================================================================
# Publishers, teams, volumes
# =============================================================================
@mcp.tool(description=TOOLS["get_publishers"].description)
def get_publishers(
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
    sort: Sort = None,
    filter: Filter = None,
) -> dict:
    return _run("get_publishers", field_list=field_list, limit=limit,
                offset=offset, sort=sort, filter=filter)


@mcp.tool(description=TOOLS["get_publisher_by_id"].description)
def get_publisher_by_id(publisher_id: PublisherId, field_list: FieldList = None) -> dict:
    return _run("get_publisher_by_id", publisher_id=publisher_id, field_list=field_list)


@mcp.tool(description=TOOLS["get_teams"].description)
def get_teams(
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
    sort: Sort = None,
    filter: Filter = None,
) -> dict:
    return _run("get_teams", field_list=field_list, limit=limit,
                offset=offset, sort=sort, filter=filter)


@mcp.tool(description=TOOLS["get_team_by_id"].description)
def get_team_by_id(team_id: TeamId, field_list: FieldList = None) -> dict:
    return _run("get_team_by_id", team_id=team_id, field_list=field_list)


@mcp.tool(description=TOOLS["get_volumes"].description)
def get_volumes(
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
    sort: Sort = None,
    filter: Filter = None,
) -> dict:
    return _run("get_volumes", field_list=field_list, limit=limit,
                offset=offset, sort=sort, filter=filter)


@mcp.tool(description=TOOLS["get_volume_by_id"].description)
def get_volume_by_id(volume_id: VolumeId, field_list: FieldList = None) -> dict:
    return _run("get_volume_by_id", volume_id=volume_id, field_list=field_list)


# =============================================================================
# Search and HTML digest
# =============================================================================
@mcp.tool(description=TOOLS["search"].description)
def search(
    query: Query,
    resources: Resources = None,
    field_list: FieldList = None,
    limit: Limit = None,
    offset: Offset = None,
) -> dict:
    return _run("search", query=query, resources=resources,
                field_list=field_list, limit=limit, offset=offset)


@mcp.tool(description=TOOLS["generate_comics_html"].description)
def generate_comics_html(
    title: PageTitle = None,
    name: IssueName = None,
    issue_number: IssueNumber = None,
    sort: Sort = None,
    limit: DigestLimit = 20,
    offset: Offset = None,
) -> dict:
    """Returns {html, count, total, message}; "html" is a complete page."""
    return _run("generate_comics_html", title=title, name=name,
                issue_number=issue_number, sort=sort, limit=limit, offset=offset)


# =============================================================================
# Server entry point
# =============================================================================
def serve(config: ComicVineConfig | None = None) -> None:
    """Build the Comic Vine client and run the server over stdio.

    Raises:
        ConfigurationError: if the API key or base URL is missing.  The server
            never starts in that case.
    """
    config = config or load_config()
    configure(ComicVineClient(config))
    logging.info(f"DC Comics MCP server running on stdio ({len(TOOLS)} tools, {config.api_base})")
    mcp.run()


if __name__ == "__main__":
    load_dotenv()
    try:
        serve()
    except ConfigurationError as e:
        logging.error(f"{_RED}Fatal: {e}{_RESET}")
        sys.exit(1)
