# =============================================================================
# core/orchestrator.py  |  Questions Comic Vine cannot answer in one call
# =============================================================================
#
# Comic Vine has no "issues for character 1699" endpoint, no "characters in
# issue 6" endpoint, and no "movies for Batman" endpoint.  Each of those is a
# short fixed pipeline:
#
#   1. RESOLVE  search for the anchor entity, asking only for identity + the
#               cross-reference field the next step needs
#   2. GUARD    no anchor, or the cross-reference field is missing / empty /
#               not a list → return empty() right away, no further calls
#   3. EXTRACT  pull NAMES (not ids) out of the stubs and join them with
#               " OR " into one full-text query
#   4. FETCH    search again with the derived query and the caller's
#               field_list (or the kind default), limit and offset
#   5. WRAP     normalize through wrap()
#
# When the anchor search matches several entities only the FIRST is used.
# Gateway errors at any step abort the whole operation, and so does an anchor
# envelope whose status_code is not 1 (e.g. 100, invalid API key).
# =============================================================================

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from core.arguments import (
    CharacterNameArguments,
    CharactersForIssueArguments,
    IssuesForCharacterArguments,
)
from core.envelope import empty, wrap
from core.errors import UpstreamError
from core.gateway import ComicVineGateway
from core.models import Character, CrossReference, Issue, Movie
from core.resources import ResourceKind, default_fields, format_resource_id

logger = logging.getLogger(__name__)


def _first_result(payload: Any) -> dict[str, Any] | None:
    """The anchor: first search hit, or None when there is nothing usable.

    Raises UpstreamError when Comic Vine reports an in-band failure.
    """
    if not isinstance(payload, dict):
        return None
    status_code = payload.get("status_code", 1)
    if status_code != 1:
        # In-band failure (100 = invalid API key); not the same as "not found".
        raise UpstreamError(status_code, str(payload.get("error", "")))
    results = payload.get("results")
    if not isinstance(results, list) or not results:
        return None
    if len(results) > 1:
        logger.info("Anchor search matched %d entities; using the first", len(results))
    first = results[0]
    return first if isinstance(first, dict) else None


def cross_reference_names(stubs: Any) -> list[str]:
    """Names of the stubs in a cross-reference field.

    Anything that is not a list yields no names; stubs without a non-empty
    name are skipped.
    """
    if not isinstance(stubs, list):
        return []
    names = []
    for stub in stubs:
        try:
            ref = CrossReference.model_validate(stub)
        except ValidationError:
            continue
        if ref.name.strip():
            names.append(ref.name)
    return names


def join_names(names: Iterable[str]) -> str:
    """Build one full-text disjunction: ["A", "B"] → "A OR B"."""
    return " OR ".join(names)


def get_issues_for_character(
    client: ComicVineGateway, args: IssuesForCharacterArguments
) -> dict[str, Any]:
    """Issues featuring the character with the given id."""
    anchor_payload = client.search(
        format_resource_id(ResourceKind.CHARACTER, args.character_id),
        resources=ResourceKind.CHARACTER.value,
        field_list="id,name",
    )
    character = _first_result(anchor_payload)
    name = (character or {}).get("name")
    if not isinstance(name, str) or not name.strip():
        logger.info("Character %s not found; returning no issues", args.character_id)
        return empty(args.limit, args.offset)

    payload = client.search(
        name,
        resources=ResourceKind.ISSUE.value,
        field_list=args.field_list or default_fields(ResourceKind.ISSUE),
        limit=args.limit,
        offset=args.offset,
    )
    return wrap(Issue, payload)


def get_characters_for_issue(
    client: ComicVineGateway, args: CharactersForIssueArguments
) -> dict[str, Any]:
    """Characters credited in the issue with the given id."""
    anchor_payload = client.search(
        format_resource_id(ResourceKind.ISSUE, args.issue_id),
        resources=ResourceKind.ISSUE.value,
        field_list="id,name,character_credits",
    )
    issue = _first_result(anchor_payload)
    names = cross_reference_names((issue or {}).get("character_credits"))
    if not names:
        logger.info("Issue %s has no character credits; returning no characters", args.issue_id)
        return empty(args.limit, args.offset)

    payload = client.search(
        join_names(names),
        resources=ResourceKind.CHARACTER.value,
        field_list=args.field_list or default_fields(ResourceKind.CHARACTER),
        limit=args.limit,
        offset=args.offset,
    )
    return wrap(Character, payload)


def get_movies_by_character(
    client: ComicVineGateway, args: CharacterNameArguments
) -> dict[str, Any]:
    """Movies featuring the first character matching ``args.filter``."""
    anchor_payload = client.search(
        args.filter,
        resources=ResourceKind.CHARACTER.value,
        field_list="id,name,movies",
    )
    character = _first_result(anchor_payload)
    names = cross_reference_names((character or {}).get("movies"))
    if not names:
        logger.info("No movies found for character %r", args.filter)
        return empty(args.limit, args.offset)

    payload = client.search(
        join_names(names),
        resources=ResourceKind.MOVIE.value,
        field_list=args.field_list or default_fields(ResourceKind.MOVIE),
        limit=args.limit,
        offset=args.offset,
    )
    return wrap(Movie, payload)


def get_issues_by_character_name(
    client: ComicVineGateway, args: CharacterNameArguments
) -> dict[str, Any]:
    """Issues matching a character name; the name is already the query."""
    payload = client.search(
        args.filter,
        resources=ResourceKind.ISSUE.value,
        field_list=args.field_list or default_fields(ResourceKind.ISSUE),
        limit=args.limit,
        offset=args.offset,
    )
    return wrap(Issue, payload)
