"""One-shot commands running a single tool against a file, stdin or an argument."""

import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from ts_pilot.core.frameworks import FRAMEWORKS
from ts_pilot.core.tools import Toolbox
from ts_pilot.errors import TsPilotError

analyze_app = typer.Typer(help="Check a TypeScript snippet against type-safety heuristics.")
console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    source = Path(path)
    if not source.is_file():
        err_console.print(f"File not found: {path}", style="red", markup=False)
        raise typer.Exit(1)
    return source.read_text(encoding="utf-8")


def _run_tool(name: str, arguments: dict[str, Any]) -> None:
    try:
        result = Toolbox().call(name, arguments)
    except TsPilotError as exc:
        err_console.print(exc.message, style="red", markup=False)
        raise typer.Exit(1) from exc
    console.print(result, markup=False, highlight=False, emoji=False, soft_wrap=True)


def generate(
    path: Annotated[str, typer.Argument(help="JSON file to read, or '-' for stdin.")] = "-",
    name: Annotated[str, typer.Option(help="Name of the generated interface or type.")] = "Generated",
    strict: Annotated[bool, typer.Option(help="Type null as null only and empty arrays as never[].")] = True,
    readonly: Annotated[bool, typer.Option(help="Mark top-level properties readonly.")] = False,
) -> None:
    """Generate TypeScript types from JSON data."""
    _run_tool("generate_types", {"data": _read_source(path), "name": name, "strict": strict, "readonly": readonly})


def diagnose(
    error: Annotated[str, typer.Argument(help="TypeScript error message.")],
) -> None:
    """Explain a TypeScript error and suggest fixes."""
    _run_tool("fix_type_errors", {"error": error})


def patterns(
    framework: Annotated[str, typer.Argument(help=f"One of: {', '.join(FRAMEWORKS)}.")],
) -> None:
    """Show TypeScript patterns for a framework."""
    _run_tool("framework_patterns", {"framework": framework.lower()})


@analyze_app.command("refactor")
def refactor(
    path: Annotated[str, typer.Argument(help="TypeScript file to read, or '-' for stdin.")] = "-",
) -> None:
    """Suggest type-safe refactorings."""
    _run_tool("refactor_safe", {"code": _read_source(path)})


@analyze_app.command("generics")
def generics(
    path: Annotated[str, typer.Argument(help="TypeScript file to read, or '-' for stdin.")] = "-",
) -> None:
    """Suggest generic type parameters."""
    _run_tool("suggest_generics", {"code": _read_source(path)})


@analyze_app.command("strict")
def strict(
    path: Annotated[str, typer.Argument(help="TypeScript file to read, or '-' for stdin.")] = "-",
) -> None:
    """Check strict mode compliance."""
    _run_tool("check_strict", {"code": _read_source(path)})
