"""CLI interface for linklist.

Command-line tool for resolving link list documents into navigation trees.
"""

import json
import logging
import sys
from pathlib import Path
from typing import cast

import click
import httpx

from linklist.config import Config
from linklist.errors import LinkListError


def _configure_logging(verbose: bool) -> None:
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
    help="Path to configuration file (default: auto-discover linklist.toml)",
)
fixtures_option = click.option(
    "--fixtures-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory of JSON documents to use instead of the content API",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)


@click.group()
def cli() -> None:
    """linklist - Navigation trees from link list documents."""


@cli.command()
@click.option("--bookmark", "-b", default=None, help="Bookmark of the link list document")
@click.option("--id", "document_id", default=None, help="ID of the link list document")
@click.option(
    "--document-type",
    default=None,
    help="Document type expanded as nested link lists (overrides config)",
)
@click.option(
    "--fragment-name",
    default=None,
    help="Field holding the group of links (overrides config)",
)
@click.option("--indent", type=int, default=2, help="JSON indentation")
@config_option
@fixtures_option
@verbose_option
def resolve(
    bookmark: str | None,
    document_id: str | None,
    document_type: str | None,
    fragment_name: str | None,
    indent: int,
    config_path: Path | None,
    fixtures_dir: Path | None,
    verbose: bool,
) -> None:
    """Print the link tree of a document as JSON."""
    from linklist.factory import create_resolver

    if (bookmark is None) == (document_id is None):
        raise click.UsageError("Specify exactly one of --bookmark or --id")

    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            document_type=document_type,
            fragment_name=fragment_name,
            fixtures_dir=fixtures_dir,
        )
        resolver = create_resolver(config)
        if bookmark is not None:
            nodes = resolver.resolve_bookmark(bookmark)
        else:
            nodes = resolver.resolve_id(cast(str, document_id))
    except (LinkListError, httpx.HTTPError, ValueError, FileNotFoundError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(json.dumps([node.to_dict() for node in nodes], indent=indent))


@cli.command()
@click.option("--host", default=None, help="Host to bind to (overrides config)")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to (overrides config)")
@config_option
@fixtures_option
@verbose_option
def serve(
    host: str | None,
    port: int | None,
    config_path: Path | None,
    fixtures_dir: Path | None,
    verbose: bool,
) -> None:
    """Start the link list API server."""
    from linklist.server import run_server

    _configure_logging(verbose)

    config = Config.load(config_path).with_overrides(
        host=host,
        port=port,
        fixtures_dir=fixtures_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    if config.fixtures.directory is not None:
        click.echo(f"Fixtures directory: {config.fixtures.directory}")
    else:
        click.echo(f"Content API: {config.api.endpoint}")
    click.echo(f"Link list type: {config.link_list.document_type}")

    run_server(config)


if __name__ == "__main__":
    cli()
