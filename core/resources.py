# =============================================================================
# core/resources.py  |  Resource kinds, ID prefixes, paths and field lists
# =============================================================================
#
# Comic Vine addresses a single item as "{type prefix}-{numeric id}", e.g.
# Batman is character 1699 → "4005-1699".  The prefixes below are part of the
# wire contract with the upstream API and must never change.
#
# Each kind's value is the name Comic Vine uses in the "resources" filter of
# /search (items are "object", creators are "person").
#
# DEFAULT FIELD LISTS:
#   When a caller does not say which fields it wants, we send one of these
#   lists.  They keep payloads small AND guarantee the fields the
#   orchestrator reads later:
#     - ISSUE must include character_credits  (characters-for-issue)
#     - CHARACTER must include movies         (movies-by-character)
#   Kinds without an entry get no field_list at all, so upstream returns its
#   own default field set.
# =============================================================================

from enum import Enum


class ResourceKind(str, Enum):
    CHARACTER = "character"
    ISSUE = "issue"
    MOVIE = "movie"
    PUBLISHER = "publisher"
    CONCEPT = "concept"
    LOCATION = "location"
    TEAM = "team"
    STORY_ARC = "story_arc"
    VOLUME = "volume"
    ITEM = "object"
    CREATOR = "person"
    ORIGIN = "origin"
    POWER = "power"


RESOURCE_PREFIX: dict[ResourceKind, int] = {
    ResourceKind.ISSUE: 4000,
    ResourceKind.CHARACTER: 4005,
    ResourceKind.PUBLISHER: 4010,
    ResourceKind.CONCEPT: 4015,
    ResourceKind.LOCATION: 4020,
    ResourceKind.MOVIE: 4025,
    ResourceKind.ORIGIN: 4030,
    ResourceKind.POWER: 4035,
    ResourceKind.CREATOR: 4040,
    ResourceKind.STORY_ARC: 4045,
    ResourceKind.VOLUME: 4050,
    ResourceKind.ITEM: 4055,
    ResourceKind.TEAM: 4060,
}

# (collection endpoint, single-item endpoint)
RESOURCE_PATHS: dict[ResourceKind, tuple[str, str]] = {
    ResourceKind.CHARACTER: ("/characters", "/character"),
    ResourceKind.ISSUE: ("/issues", "/issue"),
    ResourceKind.MOVIE: ("/movies", "/movie"),
    ResourceKind.PUBLISHER: ("/publishers", "/publisher"),
    ResourceKind.CONCEPT: ("/concepts", "/concept"),
    ResourceKind.LOCATION: ("/locations", "/location"),
    ResourceKind.TEAM: ("/teams", "/team"),
    ResourceKind.STORY_ARC: ("/story_arcs", "/story_arc"),
    ResourceKind.VOLUME: ("/volumes", "/volume"),
    ResourceKind.ITEM: ("/objects", "/object"),
    ResourceKind.CREATOR: ("/people", "/person"),
    ResourceKind.ORIGIN: ("/origins", "/origin"),
    ResourceKind.POWER: ("/powers", "/power"),
}

DEFAULT_FIELD_LISTS: dict[ResourceKind, str] = {
    ResourceKind.CHARACTER: (
        "id,name,real_name,aliases,deck,image,gender,origin,publisher,"
        "first_appeared_in_issue,count_of_issue_appearances,movies,"
        "api_detail_url,site_detail_url"
    ),
    ResourceKind.ISSUE: (
        "id,name,issue_number,cover_date,store_date,deck,image,volume,"
        "character_credits,api_detail_url,site_detail_url"
    ),
    ResourceKind.MOVIE: (
        "id,name,deck,release_date,rating,runtime,budget,box_office_revenue,"
        "total_revenue,studios,image,api_detail_url,site_detail_url"
    ),
    ResourceKind.PUBLISHER: (
        "id,name,aliases,deck,image,location_city,location_state,"
        "api_detail_url,site_detail_url"
    ),
    ResourceKind.TEAM: (
        "id,name,aliases,deck,image,publisher,count_of_team_members,"
        "count_of_issue_appearances,first_appeared_in_issue,"
        "api_detail_url,site_detail_url"
    ),
    ResourceKind.VOLUME: (
        "id,name,deck,image,publisher,start_year,count_of_issues,"
        "first_issue,last_issue,api_detail_url,site_detail_url"
    ),
}


def _as_kind(kind: ResourceKind | str) -> ResourceKind:
    """Accept a ResourceKind or its name ("CHARACTER"); anything else fails."""
    if isinstance(kind, ResourceKind):
        return kind
    if isinstance(kind, str):
        try:
            return ResourceKind[kind]
        except KeyError:
            raise ValueError(f"Unknown resource kind: {kind!r}") from None
    raise TypeError(f"Resource kind must be a ResourceKind or its name, got {kind!r}")


def format_resource_id(kind: ResourceKind | str, resource_id: int) -> str:
    """Build the composite ID used by single-item endpoints.

    >>> format_resource_id(ResourceKind.CHARACTER, 1443)
    '4005-1443'

    The numeric part is passed through untouched; upstream rejects bad IDs.
    """
    return f"{RESOURCE_PREFIX[_as_kind(kind)]}-{resource_id}"


def default_fields(kind: ResourceKind | str) -> str | None:
    """Default comma-separated field list for ``kind``, or None."""
    return DEFAULT_FIELD_LISTS.get(_as_kind(kind))


def collection_path(kind: ResourceKind | str) -> str:
    return RESOURCE_PATHS[_as_kind(kind)][0]


def item_path(kind: ResourceKind | str, resource_id: int) -> str:
    """Single-item endpoint path, e.g. "/character/4005-1443"."""
    kind = _as_kind(kind)
    return f"{RESOURCE_PATHS[kind][1]}/{format_resource_id(kind, resource_id)}"
