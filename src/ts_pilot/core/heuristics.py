"""Text heuristics over TypeScript snippets.

Every rule is a plain predicate over the raw snippet text; nothing here parses
the code. Rule sets are evaluated in order and never stop early, so the same
input always yields the same findings in the same order.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

_ANY_USAGE = re.compile(r"\bany\b|: any")
_FUNCTION_DECLARATION = re.compile(r"function\s+\w+\([^)]*\)\s*{")
_OBJECT_LITERAL_CONST = re.compile(r"const \w+ = \{")
_INTERFACE_EXTENDS = re.compile(r"interface.*extends")
_TYPE_ANNOTATION = re.compile(r": \w+")


@dataclass(frozen=True)
class Finding:
    message: str
    severity: Literal["advisory"] = "advisory"


@dataclass(frozen=True)
class Rule:
    name: str
    applies: Callable[[str], bool]
    message: str


class RuleSet:
    def __init__(self, name: str, rules: Sequence[Rule]) -> None:
        self.name = name
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def evaluate(self, code: str) -> list[Finding]:
        return [Finding(rule.message) for rule in self._rules if rule.applies(code)]


# --- predicates ---


def uses_any(code: str) -> bool:
    return _ANY_USAGE.search(code) is not None


def uses_any_cast(code: str) -> bool:
    return "as any" in code


def lacks_return_annotation(code: str) -> bool:
    return _FUNCTION_DECLARATION.search(code) is not None and ": " not in code


def optional_chain_without_fallback(code: str) -> bool:
    return "?." in code and "??" not in code


def declares_object_literal(code: str) -> bool:
    return _OBJECT_LITERAL_CONST.search(code) is not None


def uses_raw_promise(code: str) -> bool:
    return "Promise" in code and "async" not in code


def unknown_in_function(code: str) -> bool:
    return "function" in code and "unknown" in code


def loose_array_type(code: str) -> bool:
    return "any[]" in code or "unknown[]" in code


def extends_interface(code: str) -> bool:
    return _INTERFACE_EXTENDS.search(code) is not None


def explicit_any_annotation(code: str) -> bool:
    return ": any" in code


def lacks_variable_annotation(code: str) -> bool:
    return _TYPE_ANNOTATION.search(code) is None and "=" in code


def function_without_annotation(code: str) -> bool:
    return "function" in code and ": " not in code


def unreflected_null(code: str) -> bool:
    return "null" in code and "| null" not in code


def unreflected_undefined(code: str) -> bool:
    return "undefined" in code and "| undefined" not in code and "?:" not in code


# --- rule tables ---

REFACTOR_RULES: tuple[Rule, ...] = (
    Rule("any-usage", uses_any, "⚠️  Replace `any` types with specific types or `unknown`"),
    Rule("any-cast", uses_any_cast, "⚠️  Remove unsafe type assertions (`as any`) and use proper type guards"),
    Rule(
        "missing-return-type",
        lacks_return_annotation,
        "📝 Add return type annotations to functions for better type safety",
    ),
    Rule(
        "optional-chain-fallback",
        optional_chain_without_fallback,
        "💡 Consider using nullish coalescing (`??`) with optional chaining for defaults",
    ),
    Rule(
        "object-literal-interface",
        declares_object_literal,
        "💡 Consider defining explicit interfaces for object literals used multiple times",
    ),
    Rule("raw-promise", uses_raw_promise, "💡 Use async/await instead of raw Promises for better readability"),
)

GENERIC_RULES: tuple[Rule, ...] = (
    Rule(
        "unknown-parameter",
        unknown_in_function,
        """Replace `unknown` with generic type parameter:
```typescript
function process<T>(data: T): T {
  return data;
}
```""",
    ),
    Rule(
        "loose-array",
        loose_array_type,
        """Use generic array types:
```typescript
function filter<T>(items: T[], predicate: (item: T) => boolean): T[] {
  return items.filter(predicate);
}
```""",
    ),
    Rule(
        "interface-extension",
        extends_interface,
        """Consider generic constraints for reusable interfaces:
```typescript
interface Repository<T extends { id: number }> {
  findById(id: number): Promise<T>;
  save(entity: T): Promise<T>;
}
```""",
    ),
)

STRICT_RULES: tuple[Rule, ...] = (
    Rule("explicit-any", explicit_any_annotation, "❌ Explicit `any` type found - violates strict mode"),
    Rule("any-cast", uses_any_cast, "❌ Unsafe type assertion `as any` - defeats type safety"),
    Rule("variable-annotation", lacks_variable_annotation, "⚠️  Missing type annotations on variables"),
    Rule("return-annotation", function_without_annotation, "⚠️  Missing return type annotations on functions"),
    Rule("unreflected-null", unreflected_null, "⚠️  Potential null values not reflected in types"),
    Rule("unreflected-undefined", unreflected_undefined, "⚠️  Potential undefined values not reflected in types"),
)

REFACTOR = RuleSet("refactor", REFACTOR_RULES)
GENERICS = RuleSet("generics", GENERIC_RULES)
STRICT = RuleSet("strict", STRICT_RULES)
