import pytest

from tools.base import Tool
from tools.registry import ToolRegistry, default_registry


class _Noop(Tool):
    name = "noop"
    description = "Does nothing"


@pytest.mark.unit
def test_default_registry_order_is_stable():
    registry = default_registry()
    expected = ["echo", "get_time", "calculate", "get_system_info", "api_stats"]
    assert registry.names() == expected
    assert [tool.name for tool in registry.list()] == expected
    assert registry.names() == expected


@pytest.mark.unit
def test_lookup_known_and_unknown():
    registry = default_registry()
    assert registry.lookup("echo").name == "echo"
    assert registry.lookup("missing") is None
    assert registry.lookup(None) is None
    assert registry.lookup(["echo"]) is None


@pytest.mark.unit
def test_describe_uses_wire_keys():
    echo = default_registry().describe()[0]
    assert echo["name"] == "echo"
    assert echo["description"] == "Echo back the input text"
    assert echo["inputSchema"]["required"] == ["message"]
    assert echo["inputSchema"]["properties"]["message"]["type"] == "string"


@pytest.mark.unit
def test_tools_without_parameters_declare_empty_schema():
    get_time = default_registry().lookup("get_time").schema()
    assert get_time["inputSchema"] == {"type": "object", "properties": {}, "required": []}


@pytest.mark.unit
def test_duplicate_registration_rejected():
    registry = ToolRegistry([_Noop()])
    with pytest.raises(ValueError):
        registry.register(_Noop())


@pytest.mark.unit
def test_contains_and_len():
    registry = ToolRegistry([_Noop()])
    assert "noop" in registry
    assert "echo" not in registry
    assert len(registry) == 1


@pytest.mark.unit
def test_schema_is_a_copy():
    registry = default_registry()
    leaked = registry.lookup("get_time").schema()["inputSchema"]
    leaked["properties"]["injected"] = {"type": "string"}
    leaked["required"].append("injected")
    empty = {"type": "object", "properties": {}, "required": []}
    assert registry.lookup("get_time").schema()["inputSchema"] == empty
    assert registry.lookup("get_system_info").schema()["inputSchema"] == empty
