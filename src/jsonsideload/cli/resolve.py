import importlib
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jsonsideload.core.schema import compile_schema
from jsonsideload.core.unmarshal import unmarshal
from jsonsideload.errors import SideloadError

console = Console()
err_console = Console(stderr=True)


def load_model(reference: str) -> type[BaseModel]:
    """Import a model from a ``package.module:ClassName`` reference."""
    module_name, _, attr = reference.partition(":")
    if not module_name or not attr:
        raise typer.BadParameter(f"Expected 'module:Class', got {reference!r}", param_hint="--model")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import module {module_name!r}: {exc}", param_hint="--model") from exc
    model = getattr(module, attr, None)
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise typer.BadParameter(f"{reference!r} is not a pydantic model class", param_hint="--model")
    return model


def _read_payload(payload: str) -> bytes:
    if payload == "-":
        return sys.stdin.buffer.read()
    return Path(payload).read_bytes()


def resolve_command(
    payload: Annotated[str, typer.Argument(help="Path to the JSON document, or '-' for stdin.")],
    model: Annotated[str, typer.Option(help="Target model as 'module:Class'.")],
    indent: Annotated[int, typer.Option(help="Indentation of the printed JSON.")] = 2,
) -> None:
    """Resolve a sideloaded JSON document and print the populated model."""
    model_cls = load_model(model)
    try:
        result = unmarshal(_read_payload(payload), model_cls)
    except (SideloadError, OSError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    console.print_json(result.model_dump_json(indent=indent), indent=indent)


def schema_command(
    model: Annotated[str, typer.Option(help="Root model as 'module:Class'.")],
) -> None:
    """Show the directive-tagged fields of a model and its related models."""
    model_cls = load_model(model)
    try:
        schemas = compile_schema(model_cls)
    except SideloadError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    table = Table(show_lines=False)
    for header in ("model", "field", "mode", "relation_key", "id_key", "related"):
        table.add_column(header)
    rows = 0
    for schema in schemas.values():
        for spec in schema.fields:
            table.add_row(
                schema.model.__name__,
                spec.name,
                spec.directive.mode.value,
                spec.directive.relation_key,
                spec.directive.id_key or "",
                spec.related.__name__,
            )
            rows += 1
    console.print(table)
    console.print(f"({rows} rows)")
