import typer

from ts_pilot.cli.analyze import analyze_app, diagnose, generate, patterns
from ts_pilot.cli.serve import serve_app

app = typer.Typer(
    name="ts-pilot",
    help="ts-pilot CLI — TypeScript type generation, error diagnosis and strictness checks.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(serve_app, name="serve")
app.command("generate")(generate)
app.command("diagnose")(diagnose)
app.add_typer(analyze_app, name="analyze")
app.command("patterns")(patterns)


def main() -> None:
    app()
