"""Tests for the capability registry."""

import json

from core.registry import DEEP_SEARCH, DEEP_SEARCH_TOOL, get_tool, list_tools


def test_exactly_one_tool():
    tools = list_tools()
    assert [tool.name for tool in tools] == ["deep_search"]


def test_list_is_stable_across_calls():
    assert list_tools() == list_tools()


def test_returned_list_is_a_copy():
    tools = list_tools()
    tools.clear()
    assert len(list_tools()) == 1


def test_query_is_required_string():
    schema = DEEP_SEARCH_TOOL.input_schema
    assert schema["type"] == "object"
    assert schema["required"] == ["query"]
    assert schema["properties"]["query"]["type"] == "string"


def test_max_results_is_optional_number_defaulting_to_five():
    prop = DEEP_SEARCH_TOOL.input_schema["properties"]["max_results"]
    assert prop["type"] == "number"
    assert prop["default"] == 5
    assert "max_results" not in DEEP_SEARCH_TOOL.input_schema["required"]


def test_wire_shape_is_json_serializable():
    wire = DEEP_SEARCH_TOOL.to_dict()
    assert set(wire) == {"name", "description", "inputSchema"}
    assert json.loads(json.dumps(wire))["inputSchema"]["required"] == ["query"]


def test_get_tool():
    assert get_tool(DEEP_SEARCH) is DEEP_SEARCH_TOOL
    assert get_tool("unknown_tool") is None
