# =============================================================================
# tools/registry.py  |  The authoritative list of callable tools
# =============================================================================
#
# Each entry pairs:
#   - a tool name           (what the caller asks for)
#   - a description         (what the LLM reads to decide WHEN to call it)
#   - an arguments model    (core/arguments.py, validated BEFORE any request)
#   - a handler             (handler(client, parsed_args) -> dict)
#
# call_tool() is the whole dispatch contract:
#   unknown name      → UnknownOperationError, no gateway call
#   bad arguments     → SchemaValidationError listing the offending fields
#   otherwise         → whatever the handler returns (or raises)
#
# tools/mcp_server.py exposes every entry over MCP; nothing else decides
# which operations exist.
# =============================================================================

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from core import digest, lookups, orchestrator
from core.arguments import (
    CharacterByIdArguments,
    CharacterNameArguments,
    CharactersForIssueArguments,
    ComicsHtmlArguments,
    IssueByIdArguments,
    IssuesForCharacterArguments,
    ListArguments,
    MovieByIdArguments,
    PublisherByIdArguments,
    SearchArguments,
    TeamByIdArguments,
    VolumeByIdArguments,
)
from core.errors import SchemaValidationError, UnknownOperationError
from core.gateway import ComicVineGateway
from core.resources import ResourceKind


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    arguments: type[BaseModel]
    handler: Callable[[ComicVineGateway, Any], dict[str, Any]]


def _list(kind: ResourceKind):
    return lambda client, args: lookups.list_resources(client, kind, args)


def _by_id(kind: ResourceKind, id_field: str):
    return lambda client, args: lookups.get_resource(
        client, kind, getattr(args, id_field), args.field_list
    )


_SPECS = [
    ToolSpec(
        "get_characters",
        "Fetch DC Comics characters with optional filters. To match a name use "
        'filter="name:Batman".',
        ListArguments,
        _list(ResourceKind.CHARACTER),
    ),
    ToolSpec(
        "get_character_by_id",
        "Fetch a single DC Comics character by its Comic Vine ID.",
        CharacterByIdArguments,
        _by_id(ResourceKind.CHARACTER, "character_id"),
    ),
    ToolSpec(
        "get_issues",
        "Fetch lists of DC Comics issues (comics) with optional filters.",
        ListArguments,
        _list(ResourceKind.ISSUE),
    ),
    ToolSpec(
        "get_issue_by_id",
        "Fetch a single DC Comics issue (comic) by its Comic Vine ID.",
        IssueByIdArguments,
        _by_id(ResourceKind.ISSUE, "issue_id"),
    ),
    ToolSpec(
        "get_issues_for_character",
        "Fetch DC Comics issues (comics) featuring the character with the given ID. "
        "Returns an empty result if the character cannot be found.",
        IssuesForCharacterArguments,
        orchestrator.get_issues_for_character,
    ),
    ToolSpec(
        "get_issues_by_character_name",
        "Search for DC Comics issues (comics) by character name. This is a friendlier "
        "alternative to searching by ID.",
        CharacterNameArguments,
        orchestrator.get_issues_by_character_name,
    ),
    ToolSpec(
        "get_characters_for_issue",
        "Fetch the DC Comics characters credited in a given issue (comic). "
        "Returns an empty result if the issue has no character credits.",
        CharactersForIssueArguments,
        orchestrator.get_characters_for_issue,
    ),
    ToolSpec(
        "get_movies",
        'Fetch DC Comics movies with optional filters. To match a title use '
        'filter="name:Batman".',
        ListArguments,
        _list(ResourceKind.MOVIE),
    ),
    ToolSpec(
        "get_movie_by_id",
        "Fetch a single DC Comics movie by its Comic Vine ID.",
        MovieByIdArguments,
        _by_id(ResourceKind.MOVIE, "movie_id"),
    ),
    ToolSpec(
        "get_movies_by_character",
        'Fetch DC Comics movies featuring a character, given the character name '
        '(e.g., "Batman"). Only the first matching character is used.',
        CharacterNameArguments,
        orchestrator.get_movies_by_character,
    ),
    ToolSpec(
        "get_publishers",
        "Fetch comic publishers with optional filters.",
        ListArguments,
        _list(ResourceKind.PUBLISHER),
    ),
    ToolSpec(
        "get_publisher_by_id",
        "Fetch a single publisher by its Comic Vine ID (DC Comics is 10).",
        PublisherByIdArguments,
        _by_id(ResourceKind.PUBLISHER, "publisher_id"),
    ),
    ToolSpec(
        "get_teams",
        "Fetch DC Comics teams (Justice League, Teen Titans...) with optional filters.",
        ListArguments,
        _list(ResourceKind.TEAM),
    ),
    ToolSpec(
        "get_team_by_id",
        "Fetch a single DC Comics team by its Comic Vine ID.",
        TeamByIdArguments,
        _by_id(ResourceKind.TEAM, "team_id"),
    ),
    ToolSpec(
        "get_volumes",
        "Fetch DC Comics volumes (series) with optional filters.",
        ListArguments,
        _list(ResourceKind.VOLUME),
    ),
    ToolSpec(
        "get_volume_by_id",
        "Fetch a single DC Comics volume (series) by its Comic Vine ID.",
        VolumeByIdArguments,
        _by_id(ResourceKind.VOLUME, "volume_id"),
    ),
    ToolSpec(
        "search",
        "Search across DC Comics resources (characters, issues/comics, volumes, etc). "
        'Use "resources" to choose the resource types: for "Batman comics" use '
        'query="Batman" and resources="character,issue". Use "field_list" to choose '
        "which fields come back.",
        SearchArguments,
        lookups.search,
    ),
    ToolSpec(
        "generate_comics_html",
        "Generate a self-contained HTML page showing DC Comics issues with their cover "
        "images. Filter by issue name or issue number.",
        ComicsHtmlArguments,
        digest.generate_comics_html,
    ),
]

TOOLS: dict[str, ToolSpec] = {spec.name: spec for spec in _SPECS}


def call_tool(
    name: str,
    arguments: Mapping[str, Any] | None,
    client: ComicVineGateway,
) -> dict[str, Any]:
    """Validate ``arguments`` for tool ``name`` and run its handler."""
    spec = TOOLS.get(name)
    if spec is None:
        raise UnknownOperationError(name)

    try:
        parsed = spec.arguments.model_validate(dict(arguments or {}))
    except ValidationError as e:
        raise SchemaValidationError.from_pydantic(e, f"arguments for {name}") from e

    return spec.handler(client, parsed)
