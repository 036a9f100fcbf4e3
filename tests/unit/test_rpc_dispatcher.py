import pytest

from rpc.dispatcher import JsonRpcDispatcher
from rpc.models import RpcErrorCode, RpcMethod
from tools.registry import default_registry


@pytest.fixture
def dispatcher(registry, executor, settings):
    return JsonRpcDispatcher(registry=registry, executor=executor, settings=settings)


def _call(dispatcher, payload):
    return dispatcher.dispatch(payload).to_wire()


@pytest.mark.unit
def test_method_enum_parsing():
    assert RpcMethod.parse("tools/call") is RpcMethod.TOOLS_CALL
    assert RpcMethod.parse("tools/delete") is None
    assert RpcMethod.parse(None) is None


@pytest.mark.unit
def test_initialize(dispatcher):
    response = _call(dispatcher, {"jsonrpc": "2.0", "id": 1, "method": "initialize"})
    assert response["id"] == 1
    assert response["result"] == {
        "protocolVersion": "2024-11-05",
        "capabilities": {"tools": {}, "logging": {}},
        "serverInfo": {"name": "demo-mcp-server", "version": "1.0.0"},
    }
    assert "error" not in response


@pytest.mark.unit
def test_initialized_notification_has_no_id(dispatcher):
    response = _call(dispatcher, {"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert response == {"jsonrpc": "2.0", "result": None}


@pytest.mark.unit
def test_tools_list(dispatcher):
    response = _call(dispatcher, {"jsonrpc": "2.0", "id": "a", "method": "tools/list"})
    assert response["id"] == "a"
    assert [t["name"] for t in response["result"]["tools"]] == default_registry().names()


@pytest.mark.unit
def test_tools_call(dispatcher, state):
    response = _call(
        dispatcher,
        {
            "jsonrpc": "2.0",
            "id": 7,
            "method": "tools/call",
            "params": {"name": "echo", "arguments": {"message": "hi"}},
        },
    )
    assert response["result"] == {"content": [{"type": "text", "text": "Echo: hi"}]}
    assert state.request_count == 1


@pytest.mark.unit
def test_tools_call_without_arguments(dispatcher):
    response = _call(
        dispatcher,
        {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "echo"}},
    )
    assert response["result"]["content"][0]["text"] == "Echo: "


@pytest.mark.unit
def test_tools_call_unknown_tool(dispatcher, state):
    response = _call(
        dispatcher,
        {"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"name": "x"}},
    )
    assert response["id"] == 3
    assert response["error"] == {
        "code": -32601,
        "message": "Method not found",
        "data": "Unknown tool: x",
    }
    assert "result" not in response
    assert state.request_count == 0


@pytest.mark.unit
def test_tools_call_missing_params(dispatcher):
    response = _call(dispatcher, {"jsonrpc": "2.0", "id": 4, "method": "tools/call"})
    assert response["error"]["code"] == RpcErrorCode.METHOD_NOT_FOUND


@pytest.mark.unit
def test_executor_fault_is_internal_error(dispatcher, monkeypatch):
    def broken(name, arguments=None):
        raise RuntimeError("state exploded")

    monkeypatch.setattr(dispatcher.executor, "execute", broken)
    response = _call(
        dispatcher,
        {"jsonrpc": "2.0", "id": 5, "method": "tools/call", "params": {"name": "echo"}},
    )
    assert response["error"] == {
        "code": -32603,
        "message": "Internal error",
        "data": "state exploded",
    }


@pytest.mark.unit
def test_unknown_method(dispatcher):
    response = _call(dispatcher, {"jsonrpc": "2.0", "id": 6, "method": "resources/list"})
    assert response["error"]["code"] == -32601
    assert response["error"]["data"] == "Unknown method: resources/list"


@pytest.mark.unit
def test_missing_id_is_rendered_null(dispatcher):
    response = _call(dispatcher, {"jsonrpc": "2.0", "method": "tools/list"})
    assert response["id"] is None


@pytest.mark.unit
def test_non_object_payload(dispatcher):
    response = _call(dispatcher, [{"jsonrpc": "2.0", "id": 1, "method": "tools/list"}])
    assert response["id"] is None
    assert response["error"]["code"] == -32601


@pytest.mark.unit
def test_malformed_json(dispatcher):
    response = dispatcher.handle_raw(b"{invalid json}")
    wire = response.to_wire()
    assert wire["id"] is None
    assert wire["error"]["code"] == -32700
    assert wire["error"]["message"] == "Parse error"
    assert isinstance(wire["error"]["data"], str)


@pytest.mark.unit
def test_empty_body_is_parse_error(dispatcher):
    assert dispatcher.handle_raw(b"").error.code == RpcErrorCode.PARSE_ERROR


@pytest.mark.unit
def test_non_finite_constants_are_parse_errors(dispatcher):
    response = dispatcher.handle_raw(b'{"jsonrpc": "2.0", "id": Infinity, "method": "tools/list"}')
    assert response.error.code == RpcErrorCode.PARSE_ERROR
    assert response.id is None


@pytest.mark.unit
def test_non_finite_id_is_not_echoed(dispatcher):
    body = _call(dispatcher, {"jsonrpc": "2.0", "id": float("nan"), "method": "initialize"})
    assert body["id"] is None
    assert "result" in body
