# =============================================================================
# core/gateway.py  |  The single doorway to the Comic Vine HTTP API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (path, params) into one GET request against the Comic Vine API and
#   hands back the parsed JSON.  Every other module in core/ talks to
#   Comic Vine through ComicVineClient.get() and nothing else.
#
# REQUEST RULES:
#   - URL = config.api_base + path  (e.g. ".../api" + "/characters")
#   - format=json and api_key=<key> are ALWAYS set, and they win over any
#     same-named caller parameter
#   - None-valued parameters are dropped, booleans become "true"/"false"
#
# FAILURE RULES (one attempt, no retries):
#   - HTTP status outside 200-299     → UpstreamError(status, body)
#   - 2xx but the body is not JSON    → UpstreamError(status, body)
#   - DNS / refused / socket timeout  → TransportError(cause)
#
# Comic Vine also reports errors INSIDE a 200 envelope (status_code 100 =
# invalid API key, 101 = object not found...).  Those are passed through
# unchanged and logged as warnings.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from core.config import ComicVineConfig
from core.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)


def serialize_query_params(params: Mapping[str, Any]) -> dict[str, str | int | float]:
    """Flatten a loose option bag into query-string-ready values.

    >>> serialize_query_params({"a": None, "b": True, "c": 5, "d": "x"})
    {'b': 'true', 'c': 5, 'd': 'x'}
    """
    result: dict[str, str | int | float] = {}
    for key, value in params.items():
        if value is None:
            continue
        # bool before int: True is an int in Python
        if isinstance(value, bool):
            result[key] = "true" if value else "false"
        else:
            result[key] = value
    return result


@runtime_checkable
class ComicVineGateway(Protocol):
    """What core/ needs from a client: ComicVineClient, or a fake in tests."""

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...

    def search(
        self,
        query: str,
        resources: str | None = None,
        field_list: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any: ...


class ComicVineClient:
    """Synchronous Comic Vine API client.

    Args:
        config: API key, base URL and user agent.
        opener: Callable with the ``urllib.request.urlopen`` signature.
            Tests inject a fake here instead of touching the network.
    """

    def __init__(
        self,
        config: ComicVineConfig,
        opener: Callable[..., Any] | None = None,
    ):
        self.config = config
        self._open = opener or urllib.request.urlopen

    def build_url(self, path: str, params: Mapping[str, Any] | None = None) -> str:
        query = serialize_query_params(params or {})
        query["format"] = "json"
        query["api_key"] = self.config.api_key
        return f"{self.config.api_base}{path}?{urllib.parse.urlencode(query)}"

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body."""
        url = self.build_url(path, params)
        request = urllib.request.Request(
            url,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "application/json",
            },
        )
        logger.debug("GET %s %s", path, serialize_query_params(params or {}))

        try:
            with self._open(request) as response:
                status = getattr(response, "status", 200)
                body = response.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            # HTTPError is also a URLError, so it has to be caught first.
            body = e.read().decode("utf-8", errors="replace") if e.fp else ""
            raise UpstreamError(e.code, body) from e
        except (urllib.error.URLError, OSError) as e:
            raise TransportError(e) from e

        if not 200 <= status < 300:
            raise UpstreamError(status, body)

        try:
            data = json.loads(body)
        except ValueError as e:
            raise UpstreamError(status, body) from e

        if isinstance(data, dict) and data.get("status_code", 1) != 1:
            logger.warning(
                "Comic Vine %s answered status_code=%s (%s)",
                path, data.get("status_code"), data.get("error"),
            )
        return data

    def search(
        self,
        query: str,
        resources: str | None = None,
        field_list: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        """Run a /search query.  The upstream endpoint is multi-resource aware."""
        return self.get(
            "/search",
            {
                "query": query,
                "resources": resources,
                "field_list": field_list,
                "limit": limit,
                "offset": offset,
            },
        )
