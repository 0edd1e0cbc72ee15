"""Errors raised by the engines and mapped to JSON-RPC error codes at the dispatch boundary."""

from __future__ import annotations

INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class TsPilotError(Exception):
    """Base error carrying the JSON-RPC code it is reported with."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(TsPilotError):
    code = INVALID_REQUEST


class MethodNotFoundError(TsPilotError):
    code = METHOD_NOT_FOUND


class InvalidInputError(TsPilotError, ValueError):
    """An argument could not be used, e.g. ``data`` that is not JSON."""

    code = INVALID_PARAMS
