"""CLI entrypoints for manifest generation."""

import logging
from typing import Annotated, Callable

import typer
import yaml
from rich.console import Console

from .config import Config, load_config
from .errors import ManifestError
from .header import load_header
from .pipeline import regenerate
from .sources import features_from_names
from .writer import ManifestWriter

console = Console()
app = typer.Typer(help="Generate the feature manifest for the icons crate.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to configuration file."),
]
ForceFlag = Annotated[
    bool,
    typer.Option("--force", "-f", help="Remove an existing manifest before generating."),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every file operation."),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    config_path: ConfigPathOption = "manifestgen.yml",
    force: ForceFlag = False,
) -> None:
    """Write the header and every configured feature to a fresh manifest."""
    config = _load(config_path)
    writer = _writer(config)
    features = features_from_names(_feature_names(config))

    try:
        result = regenerate(writer, features, force=force)
    except ManifestError as exc:
        console.print(f"[bold red]Generation failed[/]: {exc}")
        raise typer.Exit(code=1) from exc

    if result.replaced:
        console.print(f"[bold yellow]Replaced[/]: {result.path}")
    noun = "feature" if result.entry_count == 1 else "features"
    console.print(f"[bold green]Manifest written[/]: {result.path} ({result.entry_count} {noun}).")


@app.command()
def init(config_path: ConfigPathOption = "manifestgen.yml") -> None:
    """Create the manifest containing only the header."""
    config = _load(config_path)
    writer = _writer(config)
    _run(writer.initialize, "Cannot create manifest")
    console.print(f"[bold green]Created[/]: {writer.path}")


@app.command()
def append(config_path: ConfigPathOption = "manifestgen.yml") -> None:
    """Append the configured features to an existing manifest."""
    config = _load(config_path)
    writer = _writer(config)
    features = features_from_names(_feature_names(config))
    _run(lambda: writer.append_entries(features), "Cannot append features")
    console.print(f"[bold green]Appended[/]: {len(features)} feature(s) to {writer.path}")


@app.command()
def remove(config_path: ConfigPathOption = "manifestgen.yml") -> None:
    """Delete the generated manifest."""
    config = _load(config_path)
    writer = _writer(config)
    _run(writer.remove, "Cannot remove manifest")
    console.print(f"[bold green]Removed[/]: {writer.path}")


def _run(operation: Callable[[], object], label: str) -> None:
    try:
        operation()
    except ManifestError as exc:
        console.print(f"[bold red]{label}[/]: {exc}")
        raise typer.Exit(code=1) from exc


def _writer(config: Config) -> ManifestWriter:
    try:
        header = load_header(config.header_path)
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read header file {config.header_path}: {exc}") from exc
    return ManifestWriter(config.manifest_path, header=header)


def _feature_names(config: Config) -> list[str]:
    try:
        return config.feature_names()
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read features file {config.features_file}: {exc}") from exc


def _load(path: str) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid config file {path}: {exc}") from exc
