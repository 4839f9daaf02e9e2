import logging
import socket
import urllib.error
import urllib.parse

import pytest

from conftest import FakeGateway, FakeOpener, FakeResponse, http_error, json_response
from core.errors import TransportError, UpstreamError
from core.gateway import ComicVineClient, ComicVineGateway, serialize_query_params


def _query(request):
    return dict(urllib.parse.parse_qsl(urllib.parse.urlsplit(request.full_url).query))


def test_serialize_query_params():
    assert serialize_query_params({"a": None, "b": True, "c": 5, "d": "x"}) == {
        "b": "true",
        "c": 5,
        "d": "x",
    }
    assert serialize_query_params({"flag": False}) == {"flag": "false"}
    assert serialize_query_params({}) == {}


def test_get_builds_url_and_forces_format_and_key(config):
    opener = FakeOpener(json_response({"status_code": 1, "results": []}))
    client = ComicVineClient(config, opener=opener)

    data = client.get(
        "/characters",
        {"format": "xml", "api_key": "caller-key", "limit": 5, "filter": None, "x": True},
    )

    assert data == {"status_code": 1, "results": []}
    request = opener.requests[0]
    assert request.full_url.startswith("https://comicvine.test/api/characters?")
    assert _query(request) == {
        "format": "json",
        "api_key": "secret-key",
        "limit": "5",
        "x": "true",
    }
    assert request.get_header("User-agent") == config.user_agent


def test_http_404_raises_upstream_error_with_body(config):
    opener = FakeOpener(http_error("https://comicvine.test/api/nowhere", 404, "Not Found"))
    client = ComicVineClient(config, opener=opener)

    with pytest.raises(UpstreamError) as excinfo:
        client.get("/nowhere")

    assert excinfo.value.status == 404
    assert excinfo.value.body == "Not Found"


def test_non_2xx_response_without_exception_is_an_upstream_error(config):
    client = ComicVineClient(config, opener=FakeOpener(FakeResponse("moved", status=302)))

    with pytest.raises(UpstreamError) as excinfo:
        client.get("/issues")

    assert excinfo.value.status == 302
    assert excinfo.value.body == "moved"


def test_invalid_json_is_an_upstream_error(config):
    client = ComicVineClient(config, opener=FakeOpener(FakeResponse("<html>oops</html>")))

    with pytest.raises(UpstreamError) as excinfo:
        client.get("/issues")

    assert excinfo.value.status == 200
    assert "oops" in excinfo.value.body


@pytest.mark.parametrize(
    "cause",
    [urllib.error.URLError("Name or service not known"), socket.timeout("timed out"), ConnectionRefusedError()],
)
def test_network_failures_raise_transport_error(config, cause):
    client = ComicVineClient(config, opener=FakeOpener(cause))

    with pytest.raises(TransportError) as excinfo:
        client.get("/characters")

    assert excinfo.value.cause is cause
    assert excinfo.value.__cause__ is cause


def test_search_forwards_the_five_parameters(config):
    opener = FakeOpener(json_response({"results": []}))
    client = ComicVineClient(config, opener=opener)

    client.search("Batman", resources="character,issue", field_list="id,name", limit=3, offset=6)

    request = opener.requests[0]
    assert urllib.parse.urlsplit(request.full_url).path == "/api/search"
    query = _query(request)
    assert query["query"] == "Batman"
    assert query["resources"] == "character,issue"
    assert query["field_list"] == "id,name"
    assert query["limit"] == "3"
    assert query["offset"] == "6"


def test_upstream_status_code_errors_pass_through_with_a_warning(config, caplog):
    payload = {"status_code": 100, "error": "Invalid API Key", "results": []}
    client = ComicVineClient(config, opener=FakeOpener(json_response(payload)))

    with caplog.at_level(logging.WARNING, logger="core.gateway"):
        assert client.get("/characters") == payload

    assert "Invalid API Key" in caplog.text


def test_api_key_is_never_logged(config, caplog):
    client = ComicVineClient(config, opener=FakeOpener(json_response({"results": []})))

    with caplog.at_level(logging.DEBUG, logger="core.gateway"):
        client.get("/characters", {"limit": 1})

    assert "secret-key" not in caplog.text


def test_client_and_fake_satisfy_the_gateway_protocol(config):
    assert isinstance(ComicVineClient(config), ComicVineGateway)
    assert isinstance(FakeGateway(), ComicVineGateway)
