"""Command line interface for the photoframe exporter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml
from click.core import ParameterSource
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax

from photoframe.config import ConfigError, ConfigManager, ExportSettings, PhotoFrameConfig
from photoframe.errors import LibraryAccessError, SyncError
from photoframe.export import run_export
from photoframe.library import FolderLibrary
from photoframe.sync import FrameSync

console = Console()


def _handle_cli_error(message: str, *, original: Exception | None = None) -> NoReturn:
    """Surface a fatal error as a click failure (exit status 1).

    Raises:
        click.ClickException: Always.
    """
    if isinstance(original, click.ClickException):
        raise original
    raise click.ClickException(message) from original


def _configure_logging(level: str | int) -> None:
    """Route package log records through a rich handler on stderr."""
    logger = logging.getLogger("photoframe")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    logger.addHandler(handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level if isinstance(level, int) else logging.WARNING)


def _format_summary_line(command: str, root: Path | str, metrics: dict[str, Any]) -> str:
    """Return a consistent summary line for CLI commands."""
    parts = ", ".join(f"{key}={value}" for key, value in metrics.items())
    return f"[green]{command} summary for {root}: {parts}.[/green]"


def _emit_errors(errors: list[str]) -> None:
    if not errors:
        return
    console.print("[red]Errors encountered:[/red]")
    for entry in errors:
        console.print(f"  - {entry}", markup=False)


def _explicit(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE


def _load_config(cli_overrides: dict[str, Any] | None = None) -> PhotoFrameConfig:
    try:
        return ConfigManager().load(cli_overrides=cli_overrides)
    except ConfigError as exc:
        _handle_cli_error(str(exc), original=exc)


@click.group(context_settings={"help_option_names": ["--help"]})
@click.version_option(package_name="photoframe")
def cli() -> None:
    """Export photo library albums sized for a digital photo frame."""


@cli.command()
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=1),
    required=True,
    help="Width of the images to generate.",
)
@click.option(
    "-h",
    "--height",
    type=click.IntRange(min=1),
    required=True,
    help="Height of the images to generate.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
@click.option(
    "-F", "--flatten", is_flag=True, help="Single directory level in the output directory."
)
@click.option("-r", "--skip", multiple=True, help="Skip album path matching regular expression.")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["png", "jpg"]),
    default="jpg",
    help="Output image format.",
)
@click.option(
    "-n",
    "--naming",
    type=click.Choice(["date", "id"]),
    default="date",
    help="Image file name format.",
)
@click.option(
    "-L",
    "--library",
    type=click.Path(file_okay=False, path_type=Path),
    help="Folder library root (defaults to library.path from the config file).",
)
@click.pass_context
def export(
    ctx: click.Context,
    output_dir: Path,
    width: int,
    height: int,
    verbose: bool,
    flatten: bool,
    skip: tuple[str, ...],
    output_format: str,
    naming: str,
    library: Path | None,
) -> None:
    """Export albums into OUTPUT_DIR, resized and cropped to WIDTH x HEIGHT.

    Albums whose output directory already exists are left untouched, so the
    command can be re-run to pick up new albums.
    """
    overrides: dict[str, Any] = {}
    if _explicit(ctx, "flatten"):
        overrides["export.flatten"] = flatten
    if _explicit(ctx, "output_format"):
        overrides["export.format"] = output_format
    if _explicit(ctx, "naming"):
        overrides["export.naming"] = naming
    if library is not None:
        overrides["library.path"] = str(library)
    config = _load_config(overrides)

    _configure_logging(logging.INFO if verbose else config.logging.level)

    settings = ExportSettings(
        width=width,
        height=height,
        output_dir=output_dir.expanduser(),
        library_path=Path(config.library.path).expanduser(),
        flatten=config.export.flatten,
        skip=[*config.export.skip, *skip],
        format=config.export.format,
        naming=config.export.naming,
        verbose=verbose,
    )

    try:
        result = run_export(settings, FolderLibrary(settings.library_path))
    except (ConfigError, LibraryAccessError) as exc:
        _handle_cli_error(str(exc), original=exc)

    _emit_errors(result.errors)
    console.print(_format_summary_line("Export", settings.output_dir, result.counts()))


@cli.command()
@click.argument("source", type=click.Path(file_okay=False, path_type=Path))
@click.argument("destination", type=click.Path(file_okay=False, path_type=Path))
@click.option("--dry-run", is_flag=True, help="Report changes without modifying the frame.")
@click.option("-v", "--verbose", is_flag=True, help="List every copied and deleted file.")
def sync(source: Path, destination: Path, dry_run: bool, verbose: bool) -> None:
    """Mirror the export tree at SOURCE onto the frame mounted at DESTINATION."""
    config = _load_config()
    _configure_logging(logging.INFO if verbose else config.logging.level)

    try:
        result = FrameSync(source, destination, dry_run=dry_run).run()
    except SyncError as exc:
        _handle_cli_error(str(exc), original=exc)

    label = "Sync (dry run)" if dry_run else "Sync"
    console.print(_format_summary_line(label, destination, result.counts()))


@cli.group()
def config() -> None:
    """Inspect the photoframe configuration file."""


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
def config_view(no_env: bool) -> None:
    """Print the effective configuration as YAML."""
    manager = ConfigManager()
    try:
        effective = manager.load(include_env=not no_env)
    except ConfigError as exc:
        _handle_cli_error(str(exc), original=exc)

    rendered = yaml.safe_dump(effective.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(rendered, "yaml", word_wrap=True))


@config.command("init")
def config_init() -> None:
    """Write a configuration file with default values if none exists."""
    manager = ConfigManager()
    existed = manager.config_path.exists()
    path = manager.ensure_exists()
    if existed:
        console.print(f"[yellow]Configuration already exists at {path}.[/yellow]")
    else:
        console.print(f"[green]Wrote default configuration to {path}.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli()


if __name__ == "__main__":
    main()
