import io
import json
import urllib.error

import pytest

from core.config import ComicVineConfig


class FakeGateway:
    """Stands in for ComicVineClient: replays queued payloads, records calls."""

    def __init__(self, *payloads):
        self.payloads = list(payloads)
        self.calls = []

    def get(self, path, params=None):
        self.calls.append((path, dict(params or {})))
        if not self.payloads:
            raise AssertionError(f"unexpected gateway call: {path} {params}")
        payload = self.payloads.pop(0)
        if isinstance(payload, Exception):
            raise payload
        return payload

    def search(self, query, resources=None, field_list=None, limit=None, offset=None):
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


class FakeResponse:
    def __init__(self, body, status=200):
        self.status = status
        self._body = body if isinstance(body, bytes) else body.encode("utf-8")

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeOpener:
    """Replaces urllib.request.urlopen; remembers every Request it was given."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


def json_response(payload, status=200):
    return FakeResponse(json.dumps(payload), status)


def http_error(url, status, body):
    return urllib.error.HTTPError(url, status, body, {}, io.BytesIO(body.encode("utf-8")))


def envelope(results, **counters):
    payload = {
        "status_code": 1,
        "error": "OK",
        "number_of_total_results": len(results) if isinstance(results, list) else 1,
        "number_of_page_results": len(results) if isinstance(results, list) else 1,
        "limit": 100,
        "offset": 0,
        "results": results,
    }
    payload.update(counters)
    return payload


@pytest.fixture
def config():
    return ComicVineConfig(api_key="secret-key", api_base="https://comicvine.test/api")
