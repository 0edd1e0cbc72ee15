"""The six tools: argument validation, engine calls and markdown rendering of results."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from ts_pilot.core import frameworks
from ts_pilot.core.diagnostics import DiagnosticResult, ErrorDiagnoser
from ts_pilot.core.frameworks import FrameworkPattern
from ts_pilot.core.heuristics import GENERICS, REFACTOR, STRICT, Finding, RuleSet
from ts_pilot.core.inference import TypeGenerator
from ts_pilot.errors import InvalidInputError, MethodNotFoundError
from ts_pilot.models import CodeArgs, FixTypeErrorsArgs, FrameworkPatternsArgs, GenerateTypesArgs

logger = logging.getLogger(__name__)

TOOL_NAMES: tuple[str, ...] = (
    "generate_types",
    "fix_type_errors",
    "refactor_safe",
    "suggest_generics",
    "check_strict",
    "framework_patterns",
)

_STRICT_TSCONFIG = """```json
{
  "compilerOptions": {
    "strict": true,
    "noImplicitAny": true,
    "strictNullChecks": true
  }
}
```"""


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    arguments: type[BaseModel]
    handler: Callable[[Any], str]

    def input_schema(self) -> dict[str, Any]:
        schema = self.arguments.model_json_schema()
        schema.pop("title", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
        return schema

    def describe(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema()}


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _numbered(items: Sequence[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def render_generated(declaration: str) -> str:
    return (
        f"## 🎯 Generated TypeScript Types\n\n```typescript\n{declaration}\n```\n\n"
        "✅ Generated with strict type safety (no `any` types)"
    )


def render_diagnosis(error: str, result: DiagnosticResult) -> str:
    fixes = "".join(f"\n{i}. {fix}" for i, fix in enumerate(result.fixes, start=1))
    return (
        f"## 🔧 Type Error Analysis\n\n**Error:**\n`{error}`\n\n"
        f"**Explanation:**\n{result.explanation}\n\n**Suggested Fixes:**\n{fixes}"
    )


def render_refactor(findings: Sequence[Finding]) -> str:
    if not findings:
        return "✅ Code looks good! No major refactoring suggestions."
    return "## 🔄 Type-Safe Refactoring Suggestions\n\n" + _numbered([f.message for f in findings])


def render_generics(findings: Sequence[Finding]) -> str:
    if not findings:
        return (
            "💡 No obvious generic opportunities found. "
            "Consider making reusable functions generic when they work with multiple types."
        )
    return "## 🎯 Generic Type Suggestions\n\n" + "\n\n".join(f.message for f in findings)


def render_strict(findings: Sequence[Finding]) -> str:
    if not findings:
        return "✅ Code is strict mode compliant! No issues found."
    return (
        "## ⚙️  Strict Mode Compliance Check\n\n"
        + _numbered([f.message for f in findings])
        + "\n\n**Recommendation:**\nEnable strict mode in tsconfig.json:\n"
        + _STRICT_TSCONFIG
    )


def render_patterns(framework: str, patterns: Sequence[FrameworkPattern]) -> str:
    if not patterns:
        return f"No patterns found for framework: {framework}"
    parts = [f"## 📚 {framework[:1].upper()}{framework[1:]} TypeScript Patterns\n\n"]
    for i, pattern in enumerate(patterns, start=1):
        parts.append(f"### {i}. {pattern.pattern}\n\n")
        parts.append(f"{pattern.description}\n\n")
        parts.append(f"```typescript\n{pattern.code}\n```\n\n")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Toolbox
# ---------------------------------------------------------------------------


class Toolbox:
    """Routes a tool name and its raw arguments to the matching engine."""

    def __init__(
        self,
        generator: TypeGenerator | None = None,
        diagnoser: ErrorDiagnoser | None = None,
        refactor: RuleSet = REFACTOR,
        generics: RuleSet = GENERICS,
        strict: RuleSet = STRICT,
    ) -> None:
        self._generator = generator or TypeGenerator()
        self._diagnoser = diagnoser or ErrorDiagnoser()
        self._refactor = refactor
        self._generics = generics
        self._strict = strict
        self._tools: Mapping[str, Tool] = {
            "generate_types": Tool(
                "generate_types",
                "Generate strict TypeScript types from JSON data or API responses",
                GenerateTypesArgs,
                self.generate_types,
            ),
            "fix_type_errors": Tool(
                "fix_type_errors",
                "Diagnose TypeScript type errors and suggest multiple fixes with explanations",
                FixTypeErrorsArgs,
                self.fix_type_errors,
            ),
            "refactor_safe": Tool(
                "refactor_safe",
                "Suggest type-preserving refactoring improvements for TypeScript code",
                CodeArgs,
                self.refactor_safe,
            ),
            "suggest_generics": Tool(
                "suggest_generics",
                "Analyze code and suggest generic type parameters with constraints",
                CodeArgs,
                self.suggest_generics,
            ),
            "check_strict": Tool(
                "check_strict",
                "Check code for strict mode compliance and suggest improvements",
                CodeArgs,
                self.check_strict,
            ),
            "framework_patterns": Tool(
                "framework_patterns",
                "Get framework-specific TypeScript patterns and best practices",
                FrameworkPatternsArgs,
                self.framework_patterns,
            ),
        }

    @property
    def tools(self) -> Mapping[str, Tool]:
        return self._tools

    def catalogue(self) -> list[dict[str, Any]]:
        return [self._tools[name].describe() for name in TOOL_NAMES]

    def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> str:
        tool = self._tools.get(name)
        if tool is None:
            raise MethodNotFoundError(f"Unknown tool: {name}")
        try:
            args = tool.arguments.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
            raise InvalidInputError(f"Invalid arguments for {name}: {problems}") from exc
        logger.debug("Calling tool %s", name)
        return tool.handler(args)

    def _evaluate(self, rule_set: RuleSet, code: str) -> list[Finding]:
        findings = rule_set.evaluate(code)
        logger.debug("Rule set %s produced %d findings", rule_set.name, len(findings))
        return findings

    # -- handlers --

    def generate_types(self, args: GenerateTypesArgs) -> str:
        declaration = self._generator.generate(args.data, name=args.name, strict=args.strict, readonly=args.readonly)
        return render_generated(declaration)

    def fix_type_errors(self, args: FixTypeErrorsArgs) -> str:
        return render_diagnosis(args.error, self._diagnoser.analyze(args.error))

    def refactor_safe(self, args: CodeArgs) -> str:
        return render_refactor(self._evaluate(self._refactor, args.code))

    def suggest_generics(self, args: CodeArgs) -> str:
        return render_generics(self._evaluate(self._generics, args.code))

    def check_strict(self, args: CodeArgs) -> str:
        return render_strict(self._evaluate(self._strict, args.code))

    def framework_patterns(self, args: FrameworkPatternsArgs) -> str:
        return render_patterns(args.framework, frameworks.get_patterns(args.framework))
