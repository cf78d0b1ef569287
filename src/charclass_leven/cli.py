from __future__ import annotations

"""CLI entrypoint for charclass-leven."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import (
    CharClassConfig,
    CharClassMode,
    ConfigNotFoundError,
    config_from_options,
    load_config,
)
from .engine import LengthOverflowError, WeightedLevenshtein, levenshtein
from .utils.logging import set_verbosity

app = typer.Typer(help="Levenshtein distance weighted by character classes.")
console = Console()

MODE_OPTION = typer.Option(None, "--mode", "-m", help="Classification rule to apply.")
BLACKLIST_OPTION = typer.Option(
    None, "--blacklist", help="Characters whose edits are penalized in blacklist mode."
)
WHITELIST_OPTION = typer.Option(
    None, "--whitelist", help="Characters whose edits stay unpenalized in whitelist mode."
)
PENALTY_OPTION = typer.Option(
    None, "--penalty", "-p", help="Cost of a penalized edit (default 2)."
)
CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="YAML file with a base configuration."
)


def _resolve_config(
    config_path: Optional[Path],
    mode: Optional[CharClassMode],
    blacklist: Optional[str],
    whitelist: Optional[str],
    penalty: Optional[int],
) -> CharClassConfig:
    try:
        base = load_config(config_path) if config_path is not None else None
        return config_from_options(
            base, mode=mode, blacklist=blacklist, whitelist=whitelist, penalty=penalty
        )
    except ConfigNotFoundError as exc:
        console.print(f"[red]Config not found[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid configuration[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)


@app.command()
def distance(
    first: str = typer.Argument(..., help="First operand."),
    second: str = typer.Argument(..., help="Second operand."),
    mode: Optional[CharClassMode] = MODE_OPTION,
    blacklist: Optional[str] = BLACKLIST_OPTION,
    whitelist: Optional[str] = WHITELIST_OPTION,
    penalty: Optional[int] = PENALTY_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
    as_bytes: bool = typer.Option(
        False, "--bytes", help="Compare the UTF-8 bytes instead of code points."
    ),
    check: bool = typer.Option(
        False, "--check", help="Also report the unweighted reference distance."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    set_verbosity(verbose)
    config = _resolve_config(config_path, mode, blacklist, whitelist, penalty)
    a = first.encode("utf-8") if as_bytes else first
    b = second.encode("utf-8") if as_bytes else second

    try:
        value = WeightedLevenshtein(config).distance(a, b)
    except LengthOverflowError as exc:
        console.print(f"[red]Length overflow[/red]: {escape(str(exc))}")
        raise typer.Exit(code=2)

    table = Table(title="Weighted Levenshtein")
    table.add_column("field")
    table.add_column("value")
    table.add_row("first", escape(repr(a)))
    table.add_row("second", escape(repr(b)))
    table.add_row("mode", config.mode.value)
    table.add_row("penalty", str(config.penalty))
    table.add_row("distance", str(value))
    if check:
        table.add_row("unweighted", str(levenshtein(a, b)))

    console.print(table)
    console.print(f"Distance: [green]{value}[/green]")


@app.command("show-config")
def show_config(
    mode: Optional[CharClassMode] = MODE_OPTION,
    blacklist: Optional[str] = BLACKLIST_OPTION,
    whitelist: Optional[str] = WHITELIST_OPTION,
    penalty: Optional[int] = PENALTY_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    config = _resolve_config(config_path, mode, blacklist, whitelist, penalty)

    table = Table(title="Resolved Configuration")
    table.add_column("setting")
    table.add_column("value")
    for key, value in config.describe().items():
        table.add_row(key, escape(repr(value)) if key.endswith("_chars") else value)

    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
