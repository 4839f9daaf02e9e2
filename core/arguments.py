# =============================================================================
# core/arguments.py  |  Input shapes for every tool
# =============================================================================
#
# Each tool validates its arguments against one of these models BEFORE any
# request is built.  Once a model validates, everything downstream can trust
# the types: ids are ints, limit is within 1..100, offset is never negative.
#
# The Annotated aliases below (Limit, Offset, CharacterId...) carry the bounds
# and descriptions.  The models use them, and so do the MCP wrappers in
# tools/mcp_server.py, so the JSON schema a client sees has the same bounds
# call_tool() enforces.
#
# Unknown keys (e.g. a leftover "format" argument) are ignored; the gateway
# forces format=json anyway.
# =============================================================================

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

FIELD_LIST_HELP = "List of field names to include in the response, comma-separated"
LIMIT_HELP = "Limit results (max 100)"
OFFSET_HELP = "Skip the specified number of resources in the result set"
SORT_HELP = "Field and direction to sort by (e.g., name:asc or date_added:desc)"
FILTER_HELP = (
    "Filter results by field values. Single: field:value (name:Batman), "
    "Multiple: field:value,field:value, Date: field:start|end"
)
RESOURCES_HELP = (
    "Comma-separated list of resource types to search for: character, concept, "
    "origin, object, location, issue, story_arc, volume, publisher, person, team, video"
)

# -----------------------------------------------------------------------------
# Shared parameter types
# -----------------------------------------------------------------------------
FieldList = Annotated[Optional[str], Field(description=FIELD_LIST_HELP)]
Limit = Annotated[Optional[int], Field(ge=1, le=100, description=LIMIT_HELP)]
DigestLimit = Annotated[int, Field(ge=1, le=100, description=LIMIT_HELP)]
Offset = Annotated[Optional[int], Field(ge=0, description=OFFSET_HELP)]
Sort = Annotated[Optional[str], Field(description=SORT_HELP)]
Filter = Annotated[Optional[str], Field(description=FILTER_HELP)]
Resources = Annotated[Optional[str], Field(description=RESOURCES_HELP)]
Query = Annotated[str, Field(min_length=1, description="Search query string")]
CharacterName = Annotated[
    str, Field(min_length=1, description='Name of the character (e.g., "Superman", "Batman")')
]

CharacterId = Annotated[int, Field(description="Unique identifier for the character")]
IssueId = Annotated[int, Field(description="Unique identifier for the issue")]
MovieId = Annotated[int, Field(description="Unique identifier for the movie")]
PublisherId = Annotated[int, Field(description="Unique identifier for the publisher")]
TeamId = Annotated[int, Field(description="Unique identifier for the team")]
VolumeId = Annotated[int, Field(description="Unique identifier for the volume")]

PageTitle = Annotated[Optional[str], Field(description="Custom title for the HTML page")]
IssueName = Annotated[Optional[str], Field(description="Filter by issue name")]
IssueNumber = Annotated[Optional[str], Field(description="Filter by issue number")]


class ToolArguments(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PageArguments(ToolArguments):
    field_list: FieldList = None
    limit: Limit = None
    offset: Offset = None


class ListArguments(PageArguments):
    """Arguments shared by every collection endpoint (/characters, /issues...)."""

    sort: Sort = None
    filter: Filter = None


# -----------------------------------------------------------------------------
# By-ID lookups
# -----------------------------------------------------------------------------
class ByIdArguments(ToolArguments):
    field_list: FieldList = None


class CharacterByIdArguments(ByIdArguments):
    character_id: CharacterId = Field(alias="characterId")


class IssueByIdArguments(ByIdArguments):
    issue_id: IssueId = Field(alias="issueId")


class MovieByIdArguments(ByIdArguments):
    movie_id: MovieId = Field(alias="movieId")


class PublisherByIdArguments(ByIdArguments):
    publisher_id: PublisherId = Field(alias="publisherId")


class TeamByIdArguments(ByIdArguments):
    team_id: TeamId = Field(alias="teamId")


class VolumeByIdArguments(ByIdArguments):
    volume_id: VolumeId = Field(alias="volumeId")


# -----------------------------------------------------------------------------
# Composite lookups
# -----------------------------------------------------------------------------
class IssuesForCharacterArguments(PageArguments):
    character_id: CharacterId = Field(alias="characterId")


class CharactersForIssueArguments(PageArguments):
    issue_id: IssueId = Field(alias="issueId")


class CharacterNameArguments(PageArguments):
    """Used by get_issues_by_character_name and get_movies_by_character."""

    filter: CharacterName


# -----------------------------------------------------------------------------
# Search and HTML digest
# -----------------------------------------------------------------------------
class SearchArguments(PageArguments):
    query: Query
    resources: Resources = None


class ComicsHtmlArguments(ToolArguments):
    title: PageTitle = None
    name: IssueName = None
    issue_number: IssueNumber = Field(default=None, alias="issueNumber")
    sort: Sort = Field(default=None, alias="orderBy")
    limit: DigestLimit = 20
    offset: Offset = None
