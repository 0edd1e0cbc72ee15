"""Wire models: the JSON-RPC envelope and the argument models of each tool."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Framework = Literal["react", "nextjs", "express", "nodejs", "vue", "angular"]


# --- JSON-RPC 2.0 envelope ---


class JsonRpcRequest(BaseModel):
    """Inbound request. A request without an ``id`` member is a notification."""

    jsonrpc: str = "2.0"
    id: int | str | None = None
    method: str
    params: dict[str, Any] | None = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class ErrorDetail(BaseModel):
    code: int
    message: str


class JsonRpcResponse(BaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None
    result: Any | None = None
    error: ErrorDetail | None = None

    def to_line(self) -> str:
        exclude = {"error"} if self.error is None else {"result"}
        return self.model_dump_json(exclude=exclude)


class ToolCallParams(BaseModel):
    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


# --- Tool arguments ---


class GenerateTypesArgs(BaseModel):
    model_config = ConfigDict(title="generate_types")

    data: Any = Field(description="JSON data to generate types from")
    name: str | None = Field(default=None, description="Interface/type name (default: Generated)")
    strict: bool | None = Field(default=None, description="Use strict mode (default: true)")
    readonly: bool | None = Field(default=None, description="Make properties readonly (default: false)")


class FixTypeErrorsArgs(BaseModel):
    model_config = ConfigDict(title="fix_type_errors")

    error: str = Field(description="TypeScript error message")


class CodeArgs(BaseModel):
    code: str = Field(description="TypeScript code to analyze")


class FrameworkPatternsArgs(BaseModel):
    model_config = ConfigDict(title="framework_patterns")

    framework: Framework = Field(description="Framework to get patterns for")
