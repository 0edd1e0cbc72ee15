"""Tests for the tool catalogue, argument validation and result rendering."""

from __future__ import annotations

import logging

import pytest

from ts_pilot.core.frameworks import get_patterns
from ts_pilot.core.heuristics import Finding
from ts_pilot.core.tools import TOOL_NAMES, Toolbox, render_patterns, render_refactor, render_strict
from ts_pilot.errors import INVALID_PARAMS, InvalidInputError, MethodNotFoundError


@pytest.fixture
def toolbox() -> Toolbox:
    return Toolbox()


class TestCatalogue:
    def test_every_declared_tool_is_routable(self, toolbox: Toolbox) -> None:
        assert set(toolbox.tools) == set(TOOL_NAMES)

    def test_catalogue_order_and_shape(self, toolbox: Toolbox) -> None:
        catalogue = toolbox.catalogue()
        assert [t["name"] for t in catalogue] == list(TOOL_NAMES)
        for entry in catalogue:
            assert entry["description"]
            assert entry["inputSchema"]["type"] == "object"

    @pytest.mark.parametrize(
        ("name", "required"),
        [
            ("generate_types", ["data"]),
            ("fix_type_errors", ["error"]),
            ("refactor_safe", ["code"]),
            ("suggest_generics", ["code"]),
            ("check_strict", ["code"]),
            ("framework_patterns", ["framework"]),
        ],
    )
    def test_required_arguments(self, toolbox: Toolbox, name: str, required: list[str]) -> None:
        assert toolbox.tools[name].input_schema()["required"] == required

    def test_generate_types_lists_optional_arguments(self, toolbox: Toolbox) -> None:
        properties = toolbox.tools["generate_types"].input_schema()["properties"]
        assert set(properties) == {"data", "name", "strict", "readonly"}
        assert "title" not in properties["data"]

    def test_framework_enum(self, toolbox: Toolbox) -> None:
        schema = toolbox.tools["framework_patterns"].input_schema()
        assert schema["properties"]["framework"]["enum"] == ["react", "nextjs", "express", "nodejs", "vue", "angular"]


class TestCall:
    def test_unknown_tool(self, toolbox: Toolbox) -> None:
        with pytest.raises(MethodNotFoundError, match="Unknown tool: nope"):
            toolbox.call("nope", {})

    def test_missing_argument_names_the_field(self, toolbox: Toolbox) -> None:
        with pytest.raises(InvalidInputError, match="code") as info:
            toolbox.call("check_strict", {})
        assert info.value.code == INVALID_PARAMS

    def test_invalid_json_data(self, toolbox: Toolbox) -> None:
        with pytest.raises(InvalidInputError, match="Invalid JSON data"):
            toolbox.call("generate_types", {"data": "{oops"})

    def test_unsupported_framework(self, toolbox: Toolbox) -> None:
        with pytest.raises(InvalidInputError, match="framework"):
            toolbox.call("framework_patterns", {"framework": "svelte"})

    def test_generate_types(self, toolbox: Toolbox) -> None:
        text = toolbox.call("generate_types", {"data": '{"id": 1}', "name": "Item", "readonly": True})
        assert text == (
            "## 🎯 Generated TypeScript Types\n\n"
            "```typescript\ninterface Item {\n  readonly id: number;\n}\n```\n\n"
            "✅ Generated with strict type safety (no `any` types)"
        )

    def test_generate_types_accepts_decoded_data(self, toolbox: Toolbox) -> None:
        text = toolbox.call("generate_types", {"data": [1, 2], "strict": False})
        assert "type Generated = number[];" in text

    def test_fix_type_errors(self, toolbox: Toolbox) -> None:
        text = toolbox.call("fix_type_errors", {"error": "Cannot find name 'foo'."})
        assert text.startswith("## 🔧 Type Error Analysis\n\n**Error:**\n`Cannot find name 'foo'.`")
        assert "**Suggested Fixes:**\n\n1. Import the identifier: import { foo } from '...'" in text
        assert text.endswith("\n3. Check for typos in the identifier name")

    def test_refactor_safe_sentinel(self, toolbox: Toolbox) -> None:
        assert toolbox.call("refactor_safe", {"code": ""}) == "✅ Code looks good! No major refactoring suggestions."

    def test_suggest_generics_sentinel(self, toolbox: Toolbox) -> None:
        assert toolbox.call("suggest_generics", {"code": "let a = 1"}).startswith(
            "💡 No obvious generic opportunities found."
        )

    def test_check_strict_sentinel(self, toolbox: Toolbox) -> None:
        assert toolbox.call("check_strict", {"code": ""}) == "✅ Code is strict mode compliant! No issues found."

    def test_rule_set_name_is_logged(self, toolbox: Toolbox, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ts_pilot.core.tools")
        toolbox.call("check_strict", {"code": "let x: any = null"})
        assert "Rule set strict produced 2 findings" in caplog.text

    def test_framework_patterns(self, toolbox: Toolbox) -> None:
        text = toolbox.call("framework_patterns", {"framework": "vue"})
        assert text.startswith("## 📚 Vue TypeScript Patterns\n\n### 1. Component Props (Composition API)\n\n")
        assert "```typescript\nimport { defineComponent, PropType } from 'vue';" in text


class TestRendering:
    def test_refactor_numbering(self) -> None:
        text = render_refactor([Finding("one"), Finding("two")])
        assert text == "## 🔄 Type-Safe Refactoring Suggestions\n\n1. one\n2. two"

    def test_strict_report_ends_with_tsconfig(self) -> None:
        text = render_strict([Finding("issue")])
        assert text.startswith("## ⚙️  Strict Mode Compliance Check\n\n1. issue\n\n**Recommendation:**")
        assert '"strictNullChecks": true' in text
        assert text.endswith("```")

    def test_patterns_for_unknown_framework(self) -> None:
        assert render_patterns("svelte", get_patterns("svelte")) == "No patterns found for framework: svelte"
