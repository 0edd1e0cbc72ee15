"""Match TypeScript compiler error messages against known shapes and suggest fixes.

Categories are tried in order and the first one whose predicate matches wins.
The last category matches everything, so every message gets at least one fix.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

_PROPERTY_MISSING = re.compile(r"Property '([^']+)' does not exist on type '([^']+)'")
_NAME_MISSING = re.compile(r"Cannot find name '([^']+)'")


@dataclass(frozen=True)
class DiagnosticResult:
    fixes: list[str] = field(default_factory=list)
    explanation: str = ""


@dataclass(frozen=True)
class ErrorCategory:
    name: str
    matches: Callable[[str], bool]
    diagnose: Callable[[str], DiagnosticResult]


# --- predicates ---


def is_possibly_undefined(message: str) -> bool:
    return "| undefined" in message and "not assignable" in message


def is_possibly_null(message: str) -> bool:
    return "null" in message and "not assignable" in message


def is_missing_property(message: str) -> bool:
    return "Property" in message and "does not exist" in message


def is_argument_mismatch(message: str) -> bool:
    return "Argument of type" in message and "not assignable" in message


def is_forbidden_any(message: str) -> bool:
    return "any" in message and ("implicitly" in message or "not allowed" in message)


def is_missing_name(message: str) -> bool:
    return "Cannot find name" in message


def is_anything(message: str) -> bool:
    return True


# --- diagnoses ---


def _fixed(fixes: Sequence[str], explanation: str) -> Callable[[str], DiagnosticResult]:
    def diagnose(message: str) -> DiagnosticResult:
        return DiagnosticResult(list(fixes), explanation)

    return diagnose


def diagnose_missing_property(message: str) -> DiagnosticResult:
    match = _PROPERTY_MISSING.search(message)
    if match is None:
        return DiagnosticResult(
            [
                "Add the property to the interface or type definition",
                "Use optional chaining: obj?.property",
                "Type guard: if ('property' in obj) { ... }",
            ],
            "The property is not defined on the type. Add it to the type definition or use runtime checks.",
        )
    prop, type_name = match.groups()
    return DiagnosticResult(
        [
            f"Add property to interface: {prop}: Type",
            f"Use type assertion: (obj as any).{prop}",
            f"Optional chaining: obj?.{prop}",
            f"Type guard: if ('{prop}' in obj) {{ ... }}",
        ],
        f"The property '{prop}' is not defined on type '{type_name}'. "
        "Add it to the type definition or use runtime checks.",
    )


def diagnose_missing_name(message: str) -> DiagnosticResult:
    fixes: list[str] = []
    match = _NAME_MISSING.search(message)
    if match is not None:
        identifier = match.group(1)
        fixes.append(f"Import the identifier: import {{ {identifier} }} from '...'")
        fixes.append(f"Define the identifier: const {identifier} = ...")
    else:
        fixes.append("Import the identifier from the module that declares it")
        fixes.append("Define the identifier in the current scope")
    fixes.append("Check for typos in the identifier name")
    return DiagnosticResult(fixes, "The identifier is not defined in the current scope. Import it or define it.")


ERROR_CATEGORIES: tuple[ErrorCategory, ...] = (
    ErrorCategory(
        "possibly-undefined",
        is_possibly_undefined,
        _fixed(
            [
                "Add null check: if (value !== undefined) { ... }",
                "Use non-null assertion if guaranteed: value!",
                "Provide default value: value ?? defaultValue",
                "Update type to accept undefined: Type | undefined",
            ],
            "The value may be undefined. Either guard against it, assert it's defined, "
            "provide a default, or update the type signature.",
        ),
    ),
    ErrorCategory(
        "possibly-null",
        is_possibly_null,
        _fixed(
            [
                "Add null check: if (value !== null) { ... }",
                "Use nullish coalescing: value ?? defaultValue",
                "Update type to accept null: Type | null",
            ],
            "The value may be null. Handle it explicitly or update the type signature.",
        ),
    ),
    ErrorCategory("missing-property", is_missing_property, diagnose_missing_property),
    ErrorCategory(
        "argument-mismatch",
        is_argument_mismatch,
        _fixed(
            [
                "Type assertion: value as ExpectedType",
                "Type guard to narrow type before call",
                "Update function parameter type",
                "Convert value to expected type",
            ],
            "The argument type doesn't match the parameter type. Convert the value or update type signatures.",
        ),
    ),
    ErrorCategory(
        "forbidden-any",
        is_forbidden_any,
        _fixed(
            [
                "Add explicit type annotation",
                "Use unknown instead of any",
                "Define proper interface for the object",
            ],
            'Using "any" defeats TypeScript\'s type safety. Add explicit types or use "unknown" with type guards.',
        ),
    ),
    ErrorCategory("missing-name", is_missing_name, diagnose_missing_name),
    ErrorCategory(
        "fallback",
        is_anything,
        _fixed(
            [
                "Review type signatures and ensure compatibility",
                "Use type assertions if you're certain of the type",
                "Add type guards for runtime type checking",
            ],
            "Type mismatch detected. Review the types involved and ensure they're compatible.",
        ),
    ),
)


class ErrorDiagnoser:
    def __init__(self, categories: Sequence[ErrorCategory] = ERROR_CATEGORIES) -> None:
        self._categories = tuple(categories)

    def categorize(self, message: str) -> ErrorCategory:
        for category in self._categories:
            if category.matches(message):
                return category
        raise LookupError(f"No error category matches: {message!r}")

    def analyze(self, message: str) -> DiagnosticResult:
        return self.categorize(message).diagnose(message)


_default_diagnoser = ErrorDiagnoser()


def analyze_type_error(message: str) -> DiagnosticResult:
    return _default_diagnoser.analyze(message)
