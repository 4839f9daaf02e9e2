# =============================================================================
# core/lookups.py  |  Single-call operations
# =============================================================================
#
# Everything here costs exactly ONE gateway call:
#   list_resources()   → GET /characters, /issues, /movies, ...
#   get_resource()     → GET /character/4005-1443, /issue/4000-6, ...
#   search()           → GET /search (thin pass-through)
#
# The caller's field_list wins; otherwise the kind's default list is sent.
# =============================================================================

from typing import Any

from pydantic import BaseModel

from core.arguments import ListArguments, SearchArguments
from core.envelope import wrap
from core.gateway import ComicVineGateway
from core.models import Character, Issue, Movie, Publisher, SearchResult, Team, Volume
from core.resources import ResourceKind, collection_path, default_fields, item_path

RECORD_MODELS: dict[ResourceKind, type[BaseModel]] = {
    ResourceKind.CHARACTER: Character,
    ResourceKind.ISSUE: Issue,
    ResourceKind.MOVIE: Movie,
    ResourceKind.PUBLISHER: Publisher,
    ResourceKind.TEAM: Team,
    ResourceKind.VOLUME: Volume,
}


def list_resources(
    client: ComicVineGateway, kind: ResourceKind, args: ListArguments
) -> dict[str, Any]:
    """Fetch a filtered, paginated collection of ``kind``."""
    params = args.model_dump(exclude_none=True)
    params["field_list"] = args.field_list or default_fields(kind)
    payload = client.get(collection_path(kind), params)
    return wrap(RECORD_MODELS[kind], payload)


def get_resource(
    client: ComicVineGateway,
    kind: ResourceKind,
    resource_id: int,
    field_list: str | None = None,
) -> dict[str, Any]:
    """Fetch one record of ``kind`` by its numeric id."""
    params = {"field_list": field_list or default_fields(kind)}
    payload = client.get(item_path(kind, resource_id), params)
    return wrap(RECORD_MODELS[kind], payload, many=False)


def search(client: ComicVineGateway, args: SearchArguments) -> dict[str, Any]:
    """Multi-resource search; the five parameters are forwarded as given."""
    payload = client.search(
        args.query,
        resources=args.resources,
        field_list=args.field_list,
        limit=args.limit,
        offset=args.offset,
    )
    return wrap(SearchResult, payload)
