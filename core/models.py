# =============================================================================
# core/models.py  |  Data Models (the "nouns" of the Comic Vine API)
# =============================================================================
#
# These pydantic models define the *shape* of every record that flows back
# from Comic Vine.  They validate and normalize; they carry no behavior.
#
# WHY SO MANY OPTIONAL FIELDS?
#   Comic Vine frequently omits fields or sends them as null, and a caller's
#   field_list decides which fields come back at all.  A required field would
#   reject perfectly good responses.  So almost everything is optional, and
#   nothing is ever invented: a record without an "id" stays without one.
#
# EXTRA FIELDS:
#   Records allow extra keys.  A caller may ask for a field this module does
#   not name (field_list=name,first_appeared_in_issue,...) and it must reach
#   the caller unchanged.
# =============================================================================

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -----------------------------------------------------------------------------
# Envelope status: the counters that wrap every Comic Vine response
# -----------------------------------------------------------------------------
class ResponseStatus(BaseModel):
    """Status and pagination block shared by every response."""

    status_code: int                   # 1=OK, 100=Invalid API Key, 101=Object Not Found...
    error: str                         # Text for status_code ("OK")
    number_of_total_results: int
    number_of_page_results: int
    limit: int
    offset: int


class Image(BaseModel):
    model_config = ConfigDict(extra="allow")

    icon_url: Optional[str] = None
    medium_url: Optional[str] = None
    screen_url: Optional[str] = None
    screen_large_url: Optional[str] = None
    small_url: Optional[str] = None
    super_url: Optional[str] = None
    thumb_url: Optional[str] = None
    tiny_url: Optional[str] = None
    original_url: Optional[str] = None
    image_tags: Optional[str] = None


# -----------------------------------------------------------------------------
# CrossReference: the small stubs embedded in character_credits, movies, ...
# -----------------------------------------------------------------------------
# The orchestrator only ever reads the name.
# -----------------------------------------------------------------------------
class CrossReference(BaseModel):
    """A partial embedded record, e.g. {"name": "Batman", "api_detail_url": ...}."""

    name: str
    detail_ref: Optional[str] = Field(default=None, alias="api_detail_url")


# -----------------------------------------------------------------------------
# Records
# -----------------------------------------------------------------------------
class ComicVineRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    name: Optional[str] = None
    aliases: Optional[str] = None      # Newline-separated
    api_detail_url: Optional[str] = None
    site_detail_url: Optional[str] = None
    date_added: Optional[str] = None
    date_last_updated: Optional[str] = None
    deck: Optional[str] = None         # Brief summary
    description: Optional[str] = None  # HTML
    image: Optional[Image] = None


class Character(ComicVineRecord):
    """A character (hero, villain, anti-hero...)."""

    real_name: Optional[str] = None
    birth: Optional[str] = None
    gender: Optional[Union[int, str]] = None
    origin: Optional[Union[str, dict[str, Any]]] = None
    publisher: Optional[dict[str, Any]] = None
    first_appeared_in_issue: Optional[dict[str, Any]] = None
    count_of_issue_appearances: Optional[int] = None
    character_enemies: Optional[list[Any]] = None
    character_friends: Optional[list[Any]] = None
    creators: Optional[list[Any]] = None
    issue_credits: Optional[list[Any]] = None
    issues_died_in: Optional[list[Any]] = None
    movies: Optional[list[Any]] = None
    powers: Optional[list[Any]] = None
    story_arc_credits: Optional[list[Any]] = None
    team_enemies: Optional[list[Any]] = None
    team_friends: Optional[list[Any]] = None
    teams: Optional[list[Any]] = None
    volume_credits: Optional[list[Any]] = None


class Issue(ComicVineRecord):
    """A single comic issue."""

    issue_number: Optional[str] = None
    cover_date: Optional[str] = None   # Date printed on the cover
    store_date: Optional[str] = None   # Date first sold in stores
    has_staff_review: Optional[Union[bool, dict[str, Any]]] = None
    volume: Optional[dict[str, Any]] = None
    character_credits: Optional[list[Any]] = None
    characters_died_in: Optional[list[Any]] = None
    concept_credits: Optional[list[Any]] = None
    location_credits: Optional[list[Any]] = None
    object_credits: Optional[list[Any]] = None
    person_credits: Optional[list[Any]] = None
    story_arc_credits: Optional[list[Any]] = None
    team_credits: Optional[list[Any]] = None
    teams_disbanded_in: Optional[list[Any]] = None
    first_appearance_characters: Optional[list[Any]] = None
    first_appearance_concepts: Optional[list[Any]] = None
    first_appearance_locations: Optional[list[Any]] = None
    first_appearance_objects: Optional[list[Any]] = None
    first_appearance_storyarcs: Optional[list[Any]] = None
    first_appearance_teams: Optional[list[Any]] = None


class Movie(ComicVineRecord):
    release_date: Optional[str] = None
    rating: Optional[str] = None
    runtime: Optional[str] = None
    distributor: Optional[str] = None
    has_staff_review: Optional[Union[bool, dict[str, Any]]] = None
    budget: Optional[Union[int, float, str]] = None
    box_office_revenue: Optional[Union[int, float, str]] = None
    total_revenue: Optional[Union[int, float, str]] = None
    characters: Optional[list[Any]] = None
    concepts: Optional[list[Any]] = None
    locations: Optional[list[Any]] = None
    producers: Optional[list[Any]] = None
    studios: Optional[list[Any]] = None
    teams: Optional[list[Any]] = None
    things: Optional[list[Any]] = None
    writers: Optional[list[Any]] = None


class Publisher(ComicVineRecord):
    location_address: Optional[str] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    characters: Optional[list[Any]] = None
    story_arcs: Optional[list[Any]] = None
    teams: Optional[list[Any]] = None
    volumes: Optional[list[Any]] = None


class Team(ComicVineRecord):
    publisher: Optional[dict[str, Any]] = None
    first_appeared_in_issue: Optional[dict[str, Any]] = None
    count_of_issue_appearances: Optional[int] = None
    count_of_team_members: Optional[int] = None
    characters: Optional[list[Any]] = None
    character_enemies: Optional[list[Any]] = None
    character_friends: Optional[list[Any]] = None
    disbanded_in_issues: Optional[list[Any]] = None
    issue_credits: Optional[list[Any]] = None
    issues_disbanded_in: Optional[list[Any]] = None
    movies: Optional[list[Any]] = None
    story_arc_credits: Optional[list[Any]] = None
    volume_credits: Optional[list[Any]] = None


class Volume(ComicVineRecord):
    start_year: Optional[str] = None
    count_of_issues: Optional[int] = None
    publisher: Optional[dict[str, Any]] = None
    first_issue: Optional[dict[str, Any]] = None
    last_issue: Optional[dict[str, Any]] = None
    character_credits: Optional[list[Any]] = None
    concept_credits: Optional[list[Any]] = None
    location_credits: Optional[list[Any]] = None
    object_credits: Optional[list[Any]] = None
    person_credits: Optional[list[Any]] = None
    team_credits: Optional[list[Any]] = None


class SearchResult(ComicVineRecord):
    """One hit from /search; any resource kind."""

    resource_type: Optional[str] = None

    # Search hits with a null name are returned with "" instead.
    @field_validator("name", mode="before")
    @classmethod
    def _null_name_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


# HTML digest result (generate_comics_html)
class ComicsDigest(BaseModel):
    html: str
    count: int
    total: int
    message: str
