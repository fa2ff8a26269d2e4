"""CLI interface for docsnav.

Command-line tool for serving and inspecting documentation navigation.
"""

import asyncio
import json
import logging
from pathlib import Path

import click

from docsnav.config import Config
from docsnav.core.library import DocsLibrary
from docsnav.core.tree import NavNode
from docsnav.core.types import to_slug


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose (debug) logging",
)
def cli(verbose: bool) -> None:
    """docsnav - navigation trees for documentation sites."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docsnav.toml)",
)

source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
) -> None:
    """Start the documentation API server."""
    from docsnav.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
    )
    resolved = _resolve_source_dir(config)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {resolved}")

    run_server(config)


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the tree as JSON",
)
def tree(config_path: Path | None, source_dir: Path | None, as_json: bool) -> None:
    """Print the navigation tree."""
    library = _create_library(config_path, source_dir)
    nodes = asyncio.run(library.build_tree())

    if as_json:
        click.echo(json.dumps({"items": [node.to_dict() for node in nodes]}, indent=2))
        return

    for line in _format_tree(nodes):
        click.echo(line)


@cli.command()
@click.argument("slug")
@config_option
@source_dir_option
def show(slug: str, config_path: Path | None, source_dir: Path | None) -> None:
    """Show a document and its prev/next links.

    SLUG is the document path, e.g. "guide/intro".
    """
    library = _create_library(config_path, source_dir)

    try:
        target = to_slug(slug)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    document = asyncio.run(library.get_document(target))
    if document is None:
        raise click.ClickException(f"Document not found: {slug}")

    prev_next = asyncio.run(library.get_prev_next(target))

    click.echo(f"Title: {document.title}")
    click.echo(f"URL: {document.url}")
    if document.description:
        click.echo(f"Description: {document.description}")
    click.echo(f"Previous: {_format_link(prev_next.prev)}")
    click.echo(f"Next: {_format_link(prev_next.next)}")


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _resolve_source_dir(config: Config) -> Path:
    try:
        return config.resolve_source_dir()
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e


def _create_library(config_path: Path | None, source_dir: Path | None) -> DocsLibrary:
    config = _load_config(config_path).with_overrides(source_dir=source_dir)
    return DocsLibrary(_resolve_source_dir(config), config.docs.extensions)


def _format_tree(nodes: list[NavNode], depth: int = 0) -> list[str]:
    lines: list[str] = []
    for node in nodes:
        lines.append(f"{'  ' * depth}{node.title} ({node.url})")
        lines.extend(_format_tree(node.children, depth + 1))
    return lines


def _format_link(node: NavNode | None) -> str:
    if node is None:
        return "-"
    return f"{node.title} ({node.url})"


if __name__ == "__main__":
    cli()
