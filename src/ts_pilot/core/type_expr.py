"""Type expressions produced by inference and their TypeScript rendering."""

from __future__ import annotations

import json
import re
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

_BARE_IDENTIFIER = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")


class StringShape(str, Enum):
    URL = "url"
    EMAIL = "email"
    UUID = "uuid"


@dataclass(frozen=True)
class Primitive:
    name: str
    # Informational only: never changes the rendered text.
    shape: StringShape | None = None


@dataclass(frozen=True)
class ArrayOf:
    element: TypeExpr


@dataclass(frozen=True)
class UnionOf:
    members: tuple[TypeExpr, ...]


@dataclass(frozen=True)
class FieldDescriptor:
    key: str
    type: TypeExpr
    readonly: bool = False


@dataclass(frozen=True)
class InlineRecord:
    fields: tuple[FieldDescriptor, ...]


@dataclass(frozen=True)
class LiteralNull:
    pass


@dataclass(frozen=True)
class LiteralUndefined:
    pass


@dataclass(frozen=True)
class NeverArray:
    pass


@dataclass(frozen=True)
class UnknownArray:
    pass


TypeExpr = Primitive | ArrayOf | UnionOf | InlineRecord | LiteralNull | LiteralUndefined | NeverArray | UnknownArray


def render_key(key: str, reserved_words: Collection[str]) -> str:
    if _BARE_IDENTIFIER.match(key) and key not in reserved_words:
        return key
    return json.dumps(key, ensure_ascii=False)


def render(expr: TypeExpr, reserved_words: Collection[str]) -> str:
    """Render a type expression as TypeScript source text."""
    if isinstance(expr, Primitive):
        return expr.name
    if isinstance(expr, LiteralNull):
        return "null"
    if isinstance(expr, LiteralUndefined):
        return "undefined"
    if isinstance(expr, NeverArray):
        return "never[]"
    if isinstance(expr, UnknownArray):
        return "unknown[]"
    if isinstance(expr, UnionOf):
        return " | ".join(render(m, reserved_words) for m in expr.members)
    if isinstance(expr, ArrayOf):
        inner = render(expr.element, reserved_words)
        return f"({inner})[]" if isinstance(expr.element, UnionOf) else f"{inner}[]"
    if isinstance(expr, InlineRecord):
        if not expr.fields:
            return "{}"
        props = "; ".join(f"{render_key(f.key, reserved_words)}: {render(f.type, reserved_words)}" for f in expr.fields)
        return f"{{ {props} }}"
    raise TypeError(f"Unsupported type expression: {expr!r}")
