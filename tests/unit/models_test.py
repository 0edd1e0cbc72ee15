"""Unit tests for the wire models."""

import json

import pytest
from pydantic import ValidationError

from ts_pilot.models import ErrorDetail, GenerateTypesArgs, JsonRpcRequest, JsonRpcResponse, ToolCallParams


class TestJsonRpcRequest:
    def test_request_with_id(self) -> None:
        request = JsonRpcRequest.model_validate({"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert request.id == 1
        assert not request.is_notification

    def test_string_id(self) -> None:
        assert JsonRpcRequest.model_validate({"id": "abc", "method": "ping"}).id == "abc"

    def test_missing_id_is_notification(self) -> None:
        assert JsonRpcRequest.model_validate({"method": "ping"}).is_notification

    def test_null_id_is_not_a_notification(self) -> None:
        assert not JsonRpcRequest.model_validate({"id": None, "method": "ping"}).is_notification

    def test_method_is_required(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcRequest.model_validate({"id": 1})


class TestJsonRpcResponse:
    def test_success_line_has_no_error_member(self) -> None:
        line = JsonRpcResponse(id=1, result={"ok": True}).to_line()
        assert json.loads(line) == {"jsonrpc": "2.0", "id": 1, "result": {"ok": True}}

    def test_error_line_has_no_result_member(self) -> None:
        line = JsonRpcResponse(id="x", error=ErrorDetail(code=-32601, message="nope")).to_line()
        assert json.loads(line) == {"jsonrpc": "2.0", "id": "x", "error": {"code": -32601, "message": "nope"}}

    def test_line_is_single_line(self) -> None:
        line = JsonRpcResponse(id=1, result={"text": "a\nb"}).to_line()
        assert "\n" not in line


class TestArguments:
    def test_tool_call_arguments_default_to_empty(self) -> None:
        assert ToolCallParams.model_validate({"name": "check_strict"}).arguments == {}

    def test_generate_types_requires_data(self) -> None:
        with pytest.raises(ValidationError):
            GenerateTypesArgs.model_validate({"name": "X"})

    def test_generate_types_accepts_any_data(self) -> None:
        assert GenerateTypesArgs.model_validate({"data": {"a": [1]}}).data == {"a": [1]}
