"""Infer TypeScript declarations from JSON data."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Collection, Mapping
from typing import Any
from urllib.parse import urlsplit

from ts_pilot.core.type_expr import (
    ArrayOf,
    FieldDescriptor,
    InlineRecord,
    LiteralNull,
    LiteralUndefined,
    NeverArray,
    Primitive,
    StringShape,
    TypeExpr,
    UnionOf,
    UnknownArray,
    render,
    render_key,
)
from ts_pilot.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_TYPE_NAME = "Generated"

RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger", "default", "delete", "do",
        "else", "enum", "export", "extends", "false", "finally", "for", "function", "if", "import",
        "in", "instanceof", "new", "null", "return", "super", "switch", "this", "throw", "true",
        "try", "typeof", "var", "void", "while", "with", "as", "implements", "interface", "let",
        "package", "private", "protected", "public", "static", "yield", "any", "boolean",
        "constructor", "declare", "get", "module", "require", "number", "set", "string", "symbol",
        "type", "from", "of",
    }
)  # fmt: skip

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)


class _Undefined:
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()
"""Stands in for a JavaScript ``undefined`` when data is passed as a Python value."""


def classify_string(value: str) -> StringShape | None:
    if _is_url(value):
        return StringShape.URL
    if _EMAIL.match(value):
        return StringShape.EMAIL
    if _UUID.match(value):
        return StringShape.UUID
    return None


def _is_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def primitive_of(value: Any) -> Primitive:
    """Classify a value by its runtime type alone, without looking inside containers."""
    if isinstance(value, str):
        return Primitive("string", classify_string(value))
    if isinstance(value, bool):
        return Primitive("boolean")
    if isinstance(value, int | float):
        return Primitive("number")
    return Primitive("unknown")


class TypeGenerator:
    """Turns a JSON value into an ``interface`` or ``type`` declaration."""

    def __init__(self, reserved_words: Collection[str] = RESERVED_WORDS) -> None:
        self._reserved_words = reserved_words

    def generate(
        self,
        data: Any,
        name: str | None = None,
        strict: bool | None = None,
        readonly: bool | None = None,
    ) -> str:
        name = name or DEFAULT_TYPE_NAME
        strict = strict is not False
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as exc:
                raise InvalidInputError(f"Invalid JSON data: {exc}") from exc
        logger.debug("Generating type %s (strict=%s, readonly=%s)", name, strict, bool(readonly))
        return self._declare(name, data, strict, bool(readonly))

    def _declare(self, name: str, value: Any, strict: bool, readonly: bool) -> str:
        if value is None:
            return f"type {name} = null;"
        if isinstance(value, list | tuple):
            if not value:
                return f"type {name} = {'never[]' if strict else 'unknown[]'};"
            # Only the first element decides the element type at the root.
            return f"type {name} = {self._render(ArrayOf(self.infer(value[0], strict)))};"
        if not isinstance(value, Mapping):
            return f"type {name} = {self._render(self.infer(value, strict))};"

        fields = self.fields_of(value, strict, readonly)
        if not fields:
            return f"interface {name} {{}}"
        lines = [
            f"  {'readonly ' if f.readonly else ''}{render_key(f.key, self._reserved_words)}: {self._render(f.type)};"
            for f in fields
        ]
        return "interface " + name + " {\n" + "\n".join(lines) + "\n}"

    def fields_of(self, obj: Mapping[Any, Any], strict: bool, readonly: bool = False) -> tuple[FieldDescriptor, ...]:
        return tuple(FieldDescriptor(str(key), self.infer(value, strict), readonly) for key, value in obj.items())

    def infer(self, value: Any, strict: bool = True) -> TypeExpr:
        if value is None:
            return LiteralNull() if strict else UnionOf((LiteralNull(), LiteralUndefined()))
        if value is UNDEFINED:
            return LiteralUndefined()
        if isinstance(value, list | tuple):
            return self._infer_array(value, strict)
        if isinstance(value, Mapping):
            return InlineRecord(self.fields_of(value, strict))
        return primitive_of(value)

    def _infer_array(self, items: list[Any] | tuple[Any, ...], strict: bool) -> TypeExpr:
        if not items:
            return NeverArray() if strict else UnknownArray()
        seen: dict[str, Primitive] = {}
        for item in items:
            primitive = primitive_of(item)
            seen.setdefault(primitive.name, primitive)
        members = tuple(seen.values())
        if len(members) == 1:
            return ArrayOf(members[0])
        return ArrayOf(UnionOf(members))

    def _render(self, expr: TypeExpr) -> str:
        return render(expr, self._reserved_words)
