from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
import yaml

from assertkit.config import DiffFormat, Settings, get_settings, load_settings

app = typer.Typer(name="assertkit", help="Structural diffs with assertkit's diff engine")


def _load_document(path: Path) -> Any:
    if not path.exists():
        typer.echo(f"Error: file not found: {path}", err=True)
        raise typer.Exit(2)
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        typer.echo(f"Error: could not parse {path}: {e}", err=True)
        raise typer.Exit(2)


def _resolve_settings(config: str | None) -> Settings:
    if config is None:
        return get_settings()
    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(2)
    try:
        settings = load_settings(config_path)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    return settings


def _run_diff(left: Path, right: Path, format: DiffFormat | None, config: str | None) -> None:
    from assertkit.diff import diff as structural_diff, render_no_difference

    settings = _resolve_settings(config)
    first = _load_document(left)
    second = _load_document(right)

    if first == second:
        typer.echo("Documents are equal")
        return

    difference = structural_diff(first, second, format=format, settings=settings)
    if difference is None:
        difference = render_no_difference(first, second, format=format, settings=settings)
    typer.echo(difference)
    raise typer.Exit(1)


@app.command()
def diff(
    left: str = typer.Argument(help="Path to the expected YAML or JSON document"),
    right: str = typer.Argument(help="Path to the actual YAML or JSON document"),
    format: DiffFormat | None = typer.Option(None, "--format", "-f", help="Diff marker style"),
    config: str | None = typer.Option(None, help="Path to an assertkit settings YAML"),
    log_file: str | None = typer.Option(None, help="Write debug log to this file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Print the structural diff between two documents.

    Exits 0 when they are equal, 1 when they differ.
    """
    from assertkit.verbose import close_logger, setup_logger

    logger = None
    if verbose or log_file:
        logger = setup_logger(Path(log_file) if log_file else None, verbose=verbose)
        logger.debug(f"Comparing {left} with {right}")

    try:
        _run_diff(Path(left), Path(right), format, config)
    finally:
        if logger is not None:
            close_logger(logger)


@app.command("show-config")
def show_config(
    config: str | None = typer.Option(None, help="Path to an assertkit settings YAML"),
):
    """Print the effective settings as YAML."""
    settings = _resolve_settings(config)
    typer.echo(yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=True).rstrip())


if __name__ == "__main__":
    app()
