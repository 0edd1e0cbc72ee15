import io
import sys
from typing import Annotated

import typer
from rich.console import Console

from ts_pilot.config import get_settings
from ts_pilot.log import configure_logging

serve_app = typer.Typer(help="Start the MCP server.")
console = Console(stderr=True)


@serve_app.command("stdio")
def stdio() -> None:
    """Serve newline-delimited JSON-RPC on stdin/stdout."""
    from ts_pilot.mcp.dispatch import Dispatcher

    settings = get_settings()
    configure_logging(settings.log_level)
    if isinstance(sys.stdin, io.TextIOWrapper):
        # Undecodable bytes become U+FFFD so the line is rejected as malformed JSON.
        sys.stdin.reconfigure(errors="replace")
    Dispatcher(settings=settings).run(sys.stdin, sys.stdout)


@serve_app.command("http")
def http(
    host: Annotated[str, typer.Option(help="Interface to bind.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port to listen on.")] = 8000,
    transport: Annotated[str, typer.Option(help="FastMCP transport: sse or streamable-http.")] = "streamable-http",
) -> None:
    """Serve the tools through FastMCP over HTTP."""
    from ts_pilot.mcp.server import create_mcp_server

    settings = get_settings()
    configure_logging(settings.log_level)
    server = create_mcp_server(settings=settings)
    console.print(f"[green]Starting MCP server on {host}:{port} (transport: {transport})[/green]")
    server.run(transport=transport, host=host, port=port)  # type: ignore[arg-type]


@serve_app.callback(invoke_without_command=True)
def serve_default(ctx: typer.Context) -> None:
    """Start the stdio server unless a subcommand is given."""
    if ctx.invoked_subcommand is not None:
        return
    stdio()
