"""Line-oriented JSON-RPC dispatch loop for the stdio transport.

One request is read, handled and answered before the next line is read, so
responses always come out in arrival order. Nothing raised by a handler
escapes the loop: failures become error responses, and malformed lines are
logged to stderr and skipped.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, TextIO

from pydantic import ValidationError

from ts_pilot.config import Settings, get_settings
from ts_pilot.core.tools import TOOL_NAMES, Toolbox
from ts_pilot.errors import INTERNAL_ERROR, INVALID_REQUEST, InvalidInputError, MethodNotFoundError, TsPilotError
from ts_pilot.models import ErrorDetail, JsonRpcRequest, JsonRpcResponse, ToolCallParams

logger = logging.getLogger(__name__)

Handler = Callable[[dict[str, Any]], Any]


def _text_content(text: str) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}


def _error(request_id: int | str | None, code: int, message: str) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, error=ErrorDetail(code=code, message=message))


def _serialize(response: JsonRpcResponse) -> str:
    """Serialize a response, degrading to an internal error when the payload cannot be encoded."""
    try:
        return response.to_line()
    except Exception:
        logger.exception("Could not serialize response to request %r", response.id)
    try:
        return _error(response.id, INTERNAL_ERROR, "Response could not be serialized").to_line()
    except Exception:
        # The id itself is not encodable.
        return _error(None, INTERNAL_ERROR, "Response could not be serialized").to_line()


class Dispatcher:
    def __init__(self, toolbox: Toolbox | None = None, settings: Settings | None = None) -> None:
        self._toolbox = toolbox or Toolbox()
        self._settings = settings or get_settings()
        methods: dict[str, Handler] = {
            "initialize": self._initialize,
            "notifications/initialized": self._acknowledge,
            "ping": self._acknowledge,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }
        for name in TOOL_NAMES:
            methods[name] = functools.partial(self._call_tool_directly, name)
        self._methods: Mapping[str, Handler] = methods

    @property
    def methods(self) -> Mapping[str, Handler]:
        return self._methods

    # -- methods --

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        return {
            "protocolVersion": self._settings.protocol_version,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": self._settings.server_name, "version": self._settings.server_version},
        }

    def _acknowledge(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    def _list_tools(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": self._toolbox.catalogue()}

    def _call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        try:
            call = ToolCallParams.model_validate(params)
        except ValidationError as exc:
            raise InvalidInputError("tools/call requires a tool 'name' and an 'arguments' object") from exc
        return _text_content(self._toolbox.call(call.name, call.arguments))

    def _call_tool_directly(self, name: str, params: dict[str, Any]) -> dict[str, Any]:
        return _text_content(self._toolbox.call(name, params))

    # -- dispatch --

    def handle(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Run one request. Returns None for notifications, whatever the outcome."""
        logger.debug("Handling %s", request.method)
        try:
            handler = self._methods.get(request.method)
            if handler is None:
                raise MethodNotFoundError(f"Method not found: {request.method}")
            response = JsonRpcResponse(id=request.id, result=handler(request.params or {}))
        except TsPilotError as exc:
            response = _error(request.id, exc.code, exc.message)
        except Exception as exc:
            logger.exception("Handler for %s failed", request.method)
            response = _error(request.id, INTERNAL_ERROR, str(exc) or "Internal error")

        if request.is_notification:
            if response.error is not None:
                logger.debug("Dropping error for notification %s: %s", request.method, response.error.message)
            return None
        return response

    def handle_line(self, line: str) -> str | None:
        """Handle one raw input line and return the response line to emit, if any."""
        line = line.strip()
        if not line:
            return None
        try:
            payload = json.loads(line)
        except (ValueError, RecursionError) as exc:
            logger.warning("Discarding malformed request line: %s", exc)
            return None
        if not isinstance(payload, dict):
            logger.warning("Discarding request that is not a JSON object: %.80s", line)
            return None

        try:
            request = JsonRpcRequest.model_validate(payload)
        except ValidationError:
            if "id" not in payload:
                logger.warning("Discarding invalid notification: %.80s", line)
                return None
            request_id = payload["id"] if isinstance(payload["id"], int | str) else None
            return _serialize(_error(request_id, INVALID_REQUEST, "Invalid Request"))

        response = self.handle(request)
        return _serialize(response) if response is not None else None

    def run(self, stream_in: TextIO, stream_out: TextIO) -> None:
        logger.info("Dispatch loop started")
        for line in iter(stream_in.readline, ""):
            response = self.handle_line(line)
            if response is not None:
                stream_out.write(response + "\n")
                stream_out.flush()
        logger.info("Input closed, dispatch loop stopped")
