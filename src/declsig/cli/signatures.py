from collections.abc import Sequence
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from declsig.config import get_source_root
from declsig.core.entity import entity_from
from declsig.core.errors import SignatureError
from declsig.core.syntax import declaration_at_line, extract_declarations_from_file
from declsig.models import Entity, NodeKind, SyntaxNode

console = Console()


def _load(path: str, language: str | None, root: str | None) -> list[SyntaxNode]:
    try:
        return extract_declarations_from_file(path, language, root or get_source_root())
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _entity(node: SyntaxNode, path: str) -> Entity:
    try:
        return entity_from(node, path)
    except SignatureError as exc:
        console.print(f"[red]Failed[/red] to build a signature in {escape(path)}: {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc


def _render_table(rows: Sequence[tuple[NodeKind, Entity]]) -> None:
    table = Table(show_lines=False)
    for h in ("kind", "name", "line", "signature"):
        table.add_column(h)
    for kind, entity in rows:
        table.add_row(kind.value, entity.name, str(entity.location.line), entity.signature)
    console.print(table)
    console.print(f"({len(rows)} declarations)")


def signatures(
    path: Annotated[str, typer.Argument(help="Path to a source file.")],
    language: Annotated[str | None, typer.Option(help="Language name or code (e.g. python, kotlin, kt).")] = None,
    root: Annotated[str | None, typer.Option(help="Source root used to derive Python package names.")] = None,
    kind: Annotated[NodeKind | None, typer.Option(help="Only list declarations of this kind.")] = None,
    plain: Annotated[bool, typer.Option(help="Print one signature per line.")] = False,
) -> None:
    """List the baseline signatures of every declaration in a file."""
    declarations = _load(path, language, root)
    rows = [(node.kind, _entity(node, path)) for node in declarations if kind is None or node.kind is kind]
    if plain:
        for _, entity in rows:
            typer.echo(entity.signature)
        return
    _render_table(rows)


def show(
    path: Annotated[str, typer.Argument(help="Path to a source file.")],
    line: Annotated[int, typer.Option(help="1-based line inside the declaration.")],
    language: Annotated[str | None, typer.Option(help="Language name or code (e.g. python, kotlin, kt).")] = None,
    root: Annotated[str | None, typer.Option(help="Source root used to derive Python package names.")] = None,
) -> None:
    """Show the signature of the innermost declaration covering a line."""
    declarations = _load(path, language, root)
    node = declaration_at_line(declarations, line)
    if node is None:
        console.print(f"[red]Error:[/red] no declaration covers line {line} of {escape(path)}")
        raise typer.Exit(code=1)

    entity = _entity(node, path)
    location = entity.location
    console.print(f"[bold]{escape(entity.name)}[/bold] ({node.kind.value})", soft_wrap=True)
    console.print(f"{escape(location.path)}:{location.line}:{location.column}", soft_wrap=True)
    typer.echo(entity.signature)
