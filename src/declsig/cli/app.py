from typing import Annotated

import typer
from rich.markup import escape

from declsig.cli.signatures import console, show, signatures
from declsig.config import configure_logging

app = typer.Typer(
    name="declsig",
    help="Declsig CLI: stable baseline signatures for source declarations.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    try:
        configure_logging(verbose)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


app.command("signatures")(signatures)
app.command("show")(show)


def main() -> None:
    app()
