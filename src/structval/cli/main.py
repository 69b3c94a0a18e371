"""CLI entry point for structval.

Invoked as::

    structval [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m structval.cli.main

Values are read from JSON files, or from YAML files when the file name
ends in ``.yaml`` or ``.yml``.

Commands
--------
format      Print the canonical form of a document
hash        Print the combinable hash of a document
compare     Compare two documents with deep structural equality
adapters    List registered pair adapters
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click
import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _read_source(path: str) -> str:
    """Read a document, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_or_exit(path: str) -> Any:
    """Decode a JSON or YAML document, printing errors and exiting on failure."""
    source = _read_source(path)
    try:
        if Path(path).suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(source)
        return json.loads(source)
    except json.JSONDecodeError as exc:
        err_console.print(f"[red]JSON error[/red] in {path}: {exc}")
        sys.exit(1)
    except yaml.YAMLError as exc:
        err_console.print(f"[red]YAML error[/red] in {path}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="structval")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Structural equality, hashing and canonical formatting for nested values."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from structval import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]structval[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# adapters command
# ---------------------------------------------------------------------------


@cli.command(name="adapters")
def adapters_command() -> None:
    """List the pair adapters known to the default semantics."""
    from structval import default_semantics

    names = default_semantics().detector.registry.list_adapters()
    console.print("[bold]Registered pair adapters:[/bold]")
    for name in names:
        console.print(f"  {name}", markup=False)


# ---------------------------------------------------------------------------
# format command
# ---------------------------------------------------------------------------


@cli.command(name="format")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--composite",
    "composite_name",
    default=None,
    help="Render a top-level mapping as a composite with this type name",
)
def format_command(file: str, composite_name: str | None) -> None:
    """Print the canonical form of a JSON or YAML document.

    FILE is the path to the document.
    """
    from structval import default_semantics

    document = _load_or_exit(file)
    semantics = default_semantics()

    if composite_name is not None:
        if not isinstance(document, Mapping):
            err_console.print(
                f"[red]Error:[/red] --composite needs a top-level mapping in {file}"
            )
            sys.exit(1)
        text = semantics.format_composite(
            composite_name, [(str(k), v) for k, v in document.items()]
        )
    else:
        text = semantics.format_value(document)

    console.print(Text(text))


# ---------------------------------------------------------------------------
# hash command
# ---------------------------------------------------------------------------


@cli.command(name="hash")
@click.argument("file", type=click.Path(exists=False))
def hash_command(file: str) -> None:
    """Print the combinable hash of a JSON or YAML document.

    FILE is the path to the document. String hashes vary between processes
    unless PYTHONHASHSEED is fixed.
    """
    from structval import default_semantics

    document = _load_or_exit(file)
    console.print(str(default_semantics().hash_of(document)), markup=False)


# ---------------------------------------------------------------------------
# compare command
# ---------------------------------------------------------------------------


@cli.command(name="compare")
@click.argument("left", type=click.Path(exists=False))
@click.argument("right", type=click.Path(exists=False))
def compare_command(left: str, right: str) -> None:
    """Compare two documents with deep structural equality.

    LEFT and RIGHT are paths to JSON or YAML documents. Exits with status 1
    when they differ.
    """
    from structval import default_semantics

    left_doc = _load_or_exit(left)
    right_doc = _load_or_exit(right)
    semantics = default_semantics()

    if semantics.equal(left_doc, right_doc):
        console.print(f"[green]EQUAL[/green] {left} == {right}")
        sys.exit(0)

    console.print(f"[red]DIFFERENT[/red] {left} != {right}")
    console.print(Text(f"  left:  {semantics.format_value(left_doc)}"))
    console.print(Text(f"  right: {semantics.format_value(right_doc)}"))
    sys.exit(1)


if __name__ == "__main__":
    cli()
