"""FastMCP server exposing the ts-pilot tools over FastMCP's network transports."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from ts_pilot.config import Settings, get_settings
from ts_pilot.core.tools import Toolbox
from ts_pilot.models import Framework


def create_mcp_server(toolbox: Toolbox | None = None, settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server backed by the given toolbox."""

    toolbox = toolbox or Toolbox()
    settings = settings or get_settings()
    mcp = FastMCP(
        settings.server_name,
        instructions="Generate TypeScript types, diagnose type errors and check type-safety heuristics.",
    )

    @mcp.tool()
    def generate_types(
        data: Any,
        name: str | None = None,
        strict: bool | None = None,
        readonly: bool | None = None,
    ) -> str:
        """Generate strict TypeScript types from JSON data or API responses."""
        return toolbox.call("generate_types", {"data": data, "name": name, "strict": strict, "readonly": readonly})

    @mcp.tool()
    def fix_type_errors(error: str) -> str:
        """Diagnose TypeScript type errors and suggest multiple fixes with explanations."""
        return toolbox.call("fix_type_errors", {"error": error})

    @mcp.tool()
    def refactor_safe(code: str) -> str:
        """Suggest type-preserving refactoring improvements for TypeScript code."""
        return toolbox.call("refactor_safe", {"code": code})

    @mcp.tool()
    def suggest_generics(code: str) -> str:
        """Analyze code and suggest generic type parameters with constraints."""
        return toolbox.call("suggest_generics", {"code": code})

    @mcp.tool()
    def check_strict(code: str) -> str:
        """Check code for strict mode compliance and suggest improvements."""
        return toolbox.call("check_strict", {"code": code})

    @mcp.tool()
    def framework_patterns(framework: Framework) -> str:
        """Get framework-specific TypeScript patterns and best practices."""
        return toolbox.call("framework_patterns", {"framework": framework})

    return mcp
