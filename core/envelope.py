# =============================================================================
# core/envelope.py  |  Response shape normalization
# =============================================================================
#
# Every tool answers with the same envelope Comic Vine uses:
#
#   {status_code, error, number_of_total_results, number_of_page_results,
#    limit, offset, results}
#
# wrap()  fills the counters Comic Vine left out and validates "results"
#         against a record model.  Bad shapes raise SchemaValidationError.
# empty() is the canonical "nothing found" answer.  A composite lookup whose
#         anchor is missing returns this instead of an error.
#
# Normalized records drop null fields, so a wrapped envelope validates back
# to itself unchanged.
# =============================================================================

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.errors import SchemaValidationError
from core.models import ResponseStatus

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0


def _status_defaults(payload: Mapping[str, Any], count: int) -> dict[str, Any]:
    return {
        "status_code": payload.get("status_code", 1),
        "error": payload.get("error", "OK"),
        "number_of_total_results": payload.get("number_of_total_results", count),
        "number_of_page_results": payload.get("number_of_page_results", count),
        "limit": payload.get("limit", DEFAULT_LIMIT),
        "offset": payload.get("offset", DEFAULT_OFFSET),
    }


def wrap(
    record_model: type[BaseModel],
    payload: Mapping[str, Any],
    many: bool = True,
) -> dict[str, Any]:
    """Normalize a raw Comic Vine payload into an envelope dict.

    Args:
        record_model: Shape each result must match (Character, Issue...).
        payload: Raw JSON object returned by the gateway.
        many: True for collection operations (results is a list), False for
            by-ID operations (results is a single record).

    Raises:
        SchemaValidationError: if the payload is not an object, a counter has
            the wrong type, or a result does not match ``record_model``.
    """
    if not isinstance(payload, Mapping):
        raise SchemaValidationError(
            f"Invalid upstream response: expected an object, got {type(payload).__name__}",
            ["<root>"],
        )

    results = payload.get("results")
    if many:
        if results is None:
            results = []
        elif isinstance(results, Mapping):
            # /movies sometimes answers with a bare object
            results = [results]
        count = len(results) if isinstance(results, list) else 0
        adapter = TypeAdapter(list[record_model])
    else:
        count = 1
        adapter = TypeAdapter(record_model)

    try:
        status = ResponseStatus.model_validate(_status_defaults(payload, count))
    except ValidationError as e:
        raise SchemaValidationError.from_pydantic(e, "upstream response") from e
    try:
        parsed = adapter.validate_python(results)
    except ValidationError as e:
        raise SchemaValidationError.from_pydantic(e, "upstream response", prefix="results") from e

    envelope = status.model_dump()
    envelope["results"] = adapter.dump_python(parsed, exclude_none=True)
    return envelope


def empty(limit: int | None = None, offset: int | None = None) -> dict[str, Any]:
    """The canonical zero-results envelope."""
    return {
        "status_code": 1,
        "error": "OK",
        "number_of_total_results": 0,
        "number_of_page_results": 0,
        "limit": DEFAULT_LIMIT if limit is None else limit,
        "offset": DEFAULT_OFFSET if offset is None else offset,
        "results": [],
    }
