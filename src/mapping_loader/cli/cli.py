#!/usr/bin/env python3
"""
mapping_loader.cli.cli

Typer-based CLI for checking that a batch of mapping units consolidates.

Mapping units are read from their JSON serialisation (one ``MappingUnit``
document per file). Type shapes for wildcard field mapping can be supplied as
a JSON object of ``{"type.Name": ["field", ...]}``.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Check two units:

    mapping-loader check orders.json dealers.json --types types.json
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError

from mapping_loader.errors import InvalidMappingError, MappingLoaderError
from mapping_loader.schemas import MappingUnit

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mapping-loader",
    help="Consolidate mapping units into a single mapping configuration.",
    no_args_is_help=True,
)

_TYPES_ADAPTER = TypeAdapter(dict[str, list[str]])


def _print_load_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly load error.

    Parameters
    ----------
    exc : Exception
        Exception raised while loading.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _read_unit(path: Path) -> MappingUnit:
    """Read one mapping unit document, labelling it with its path."""
    try:
        unit = MappingUnit.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise InvalidMappingError(f"Invalid mapping unit '{path}': {exc}") from exc
    if unit.source is None:
        unit = unit.model_copy(update={"source": str(path)})
    return unit


def _read_types(path: Path | None) -> dict[str, list[str]]:
    """Read registered type shapes, or nothing when no file is given."""
    if path is None:
        return {}
    try:
        return _TYPES_ADAPTER.validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise InvalidMappingError(f"Invalid type descriptor file '{path}': {exc}") from exc


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("check")
def check_cmd(
    ctx: typer.Context,
    unit_paths: list[Path] = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Mapping unit JSON documents, in load order.",
    ),
    types_path: Path | None = typer.Option(
        None,
        "--types",
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON object mapping type names to field lists.",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on wildcard mappings whose types are not registered."
    ),
    pass_through_type: str = typer.Option(
        "uuid.UUID",
        "--pass-through-type",
        help="Type copied by reference through the default converter.",
    ),
) -> None:
    """Load mapping units and print the consolidated mapping table.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    unit_paths : list[Path]
        Mapping unit documents.
    types_path : Path | None
        Optional type descriptor file for wildcard field mapping.
    strict : bool, default=False
        Whether unregistered types abort the load.
    pass_through_type : str, default="uuid.UUID"
        Type registered with the by-reference converter when the
        configuration declares custom converters.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from mapping_loader import load_mappings
        from mapping_loader.adapters.field_builders import WildcardFieldMappingBuilder
        from mapping_loader.application.options import LoadOptions
        from mapping_loader.descriptors import TypeRegistry

        registry = TypeRegistry()
        for name, fields in _read_types(types_path).items():
            registry.register(name, fields)

        units = [_read_unit(path) for path in unit_paths]
        result = load_mappings(
            units,
            options=LoadOptions(pass_through_type=pass_through_type),
            builder=WildcardFieldMappingBuilder(registry, strict=strict),
        )
    except MappingLoaderError as exc:
        raise typer.Exit(code=_print_load_error(exc, debug))
    except Exception as exc:
        logger.debug("unexpected error while loading mapping units: %r", exc)
        raise typer.Exit(code=_print_load_error(exc, debug))

    for mapping in result.mappings:
        suffix = f" [{mapping.map_id}]" if mapping.map_id else ""
        converters = mapping.custom_converters.converters if mapping.custom_converters else []
        typer.echo(
            f"{mapping.class_a} -> {mapping.class_b}{suffix}: "
            f"{len(mapping.field_mappings)} fields, {len(converters or [])} converters"
        )

    container = result.configuration.custom_converters
    if container is not None:
        for description in container.converters or []:
            typer.echo(
                f"converter: {description.class_a} -> {description.class_b} "
                f"({description.converter_type})"
            )
    typer.echo(f"[green]✓ Loaded:[/green] {len(result.mappings)} class mappings")


if __name__ == "__main__":
    app()
