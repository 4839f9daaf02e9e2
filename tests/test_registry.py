import asyncio

import pytest
from fastmcp.exceptions import ToolError

from conftest import FakeGateway, envelope
from core.arguments import LIMIT_HELP
from core.errors import SchemaValidationError, UnknownOperationError, UpstreamError
from core.resources import DEFAULT_FIELD_LISTS, ResourceKind
from tools import mcp_server
from tools.registry import TOOLS, call_tool


def test_unknown_tool_is_rejected_before_any_request():
    gateway = FakeGateway()

    with pytest.raises(UnknownOperationError) as excinfo:
        call_tool("get_sidekicks", {}, gateway)

    assert excinfo.value.name == "get_sidekicks"
    assert gateway.calls == []


def test_out_of_range_limit_names_the_field():
    gateway = FakeGateway()

    with pytest.raises(SchemaValidationError) as excinfo:
        call_tool("get_characters", {"limit": 500}, gateway)

    assert excinfo.value.fields == ["limit"]
    assert gateway.calls == []


@pytest.mark.parametrize("arguments", [{"limit": 1}, {"limit": 100}, {"offset": 0}])
def test_page_bounds_are_inclusive(arguments):
    gateway = FakeGateway(envelope([]))

    call_tool("get_teams", arguments, gateway)

    assert len(gateway.calls) == 1


@pytest.mark.parametrize(
    "arguments,field",
    [({"limit": 0}, "limit"), ({"limit": 101}, "limit"), ({"offset": -1}, "offset")],
)
def test_page_bounds_reject_just_outside(arguments, field):
    gateway = FakeGateway()

    with pytest.raises(SchemaValidationError) as excinfo:
        call_tool("get_teams", arguments, gateway)

    assert excinfo.value.fields == [field]
    assert gateway.calls == []


def test_missing_id_is_a_validation_error():
    with pytest.raises(SchemaValidationError) as excinfo:
        call_tool("get_issue_by_id", {}, FakeGateway())

    assert excinfo.value.fields == ["issueId"]


def test_list_tool_sends_filters_and_default_fields():
    gateway = FakeGateway(envelope([{"id": 1699, "name": "Batman"}]))

    result = call_tool("get_characters", {"filter": "name:Batman", "limit": 1}, gateway)

    assert result["results"] == [{"id": 1699, "name": "Batman"}]
    path, params = gateway.calls[0]
    assert path == "/characters"
    assert params == {
        "filter": "name:Batman",
        "limit": 1,
        "field_list": DEFAULT_FIELD_LISTS[ResourceKind.CHARACTER],
    }


@pytest.mark.parametrize(
    "tool,arguments,path",
    [
        ("get_character_by_id", {"characterId": 1699}, "/character/4005-1699"),
        ("get_character_by_id", {"character_id": 1699}, "/character/4005-1699"),
        ("get_issue_by_id", {"issueId": 6}, "/issue/4000-6"),
        ("get_movie_by_id", {"movieId": 12}, "/movie/4025-12"),
        ("get_publisher_by_id", {"publisherId": 10}, "/publisher/4010-10"),
        ("get_team_by_id", {"teamId": 5}, "/team/4060-5"),
        ("get_volume_by_id", {"volumeId": 796}, "/volume/4050-796"),
    ],
)
def test_by_id_tools_use_prefixed_paths(tool, arguments, path):
    gateway = FakeGateway({"results": {"id": 1, "name": "x"}})

    result = call_tool(tool, arguments, gateway)

    assert gateway.calls[0][0] == path
    assert result["results"] == {"id": 1, "name": "x"}


def test_by_id_keeps_the_caller_field_list():
    gateway = FakeGateway({"results": {"name": "Batman"}})

    call_tool("get_character_by_id", {"characterId": 1699, "field_list": "name"}, gateway)

    assert gateway.calls[0][1] == {"field_list": "name"}


def test_search_forwards_arguments_as_given():
    gateway = FakeGateway(envelope([{"id": 1699, "name": "Batman", "resource_type": "character"}]))

    result = call_tool(
        "search",
        {"query": "Batman", "resources": "character,issue", "field_list": "id,name", "limit": 5},
        gateway,
    )

    assert gateway.calls[0] == (
        "/search",
        {"query": "Batman", "resources": "character,issue", "field_list": "id,name", "limit": 5, "offset": None},
    )
    assert result["results"][0]["resource_type"] == "character"


def test_search_requires_a_query():
    with pytest.raises(SchemaValidationError) as excinfo:
        call_tool("search", {"query": ""}, FakeGateway())

    assert excinfo.value.fields == ["query"]


def test_every_tool_is_served():
    for name in TOOLS:
        assert hasattr(mcp_server, name), name


# -----------------------------------------------------------------------------
# server wrapper
# -----------------------------------------------------------------------------
@pytest.fixture
def served():
    def install(*payloads):
        gateway = FakeGateway(*payloads)
        mcp_server.configure(gateway)
        return gateway

    yield install
    mcp_server.configure(None)


def test_server_drops_unset_arguments(served):
    gateway = served(envelope([]))

    result = mcp_server._run("get_issues", field_list=None, limit=3, offset=None, sort=None, filter=None)

    assert result["results"] == []
    assert gateway.calls[0][1] == {"limit": 3, "field_list": DEFAULT_FIELD_LISTS[ResourceKind.ISSUE]}


def test_server_reports_errors_as_tool_errors(served):
    served(UpstreamError(404, "Not Found"))

    with pytest.raises(ToolError) as excinfo:
        mcp_server._run("get_movie_by_id", movie_id=1)

    assert str(excinfo.value) == "Error processing get_movie_by_id: Comic Vine API error: 404 - Not Found"


def test_server_reports_bad_arguments_as_tool_errors(served):
    gateway = served()

    with pytest.raises(ToolError) as excinfo:
        mcp_server._run("get_volumes", limit=0)

    assert str(excinfo.value).startswith("Error processing get_volumes: Invalid arguments for get_volumes")
    assert gateway.calls == []


def test_server_without_client_refuses_calls():
    mcp_server.configure(None)

    with pytest.raises(ToolError):
        mcp_server._run("get_teams")


# -----------------------------------------------------------------------------
# advertised input schemas
# -----------------------------------------------------------------------------
def _advertised_schemas():
    tools = asyncio.run(mcp_server.mcp.list_tools())
    return {tool.name: tool.parameters for tool in tools}


def _constraint(prop, key):
    if key in prop:
        return prop[key]
    for option in prop.get("anyOf", []):
        if key in option:
            return option[key]
    return None


def test_advertised_limit_carries_its_bounds():
    limit = _advertised_schemas()["get_characters"]["properties"]["limit"]

    assert _constraint(limit, "minimum") == 1
    assert _constraint(limit, "maximum") == 100
    assert limit["description"] == LIMIT_HELP


def test_advertised_ids_are_described():
    props = _advertised_schemas()["get_issues_for_character"]["properties"]

    assert props["character_id"]["description"] == "Unique identifier for the character"
    assert _constraint(props["offset"], "minimum") == 0


def test_advertised_parameters_match_the_argument_models():
    schemas = _advertised_schemas()

    assert set(schemas) == set(TOOLS)
    for name, spec in TOOLS.items():
        fields = spec.arguments.model_fields
        assert set(schemas[name]["properties"]) == set(fields), name
        required = {field for field, info in fields.items() if info.is_required()}
        assert set(schemas[name].get("required", [])) == required, name
