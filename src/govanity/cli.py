"""CLI interface for govanity.

Command-line tool for serving and checking vanity Go import paths.
"""

import io
import logging
import sys
from pathlib import Path

import click

from govanity.config import Config
from govanity.core.matcher import resolve
from govanity.core.paths import join_path
from govanity.core.render import render_import_tag
from govanity.errors import NoMatchError

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover govanity.toml)",
)


@click.group()
def cli() -> None:
    """Govanity - vanity import paths for Go packages."""


@cli.command()
@config_option
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
@click.option(
    "--docs-host",
    default=None,
    help="Documentation site browsers are redirected to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every resolved import)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    docs_host: str | None,
    verbose: bool,
) -> None:
    """Start the vanity import server."""
    from govanity.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        docs_host=docs_host,
    )

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Documentation host: {config.redirect.docs_host}")
    if config.imports:
        click.echo(f"Import mappings: {len(config.imports)}")
    else:
        click.echo(
            click.style(
                "Warning: no [[imports]] configured, every go get will 404",
                fg="yellow",
            ),
        )

    run_server(config)


@cli.command(name="resolve")
@click.argument("import_path")
@config_option
def resolve_command(import_path: str, config_path: Path | None) -> None:
    """Print the go-import document served for IMPORT_PATH."""
    config = _load_config(config_path)

    try:
        tag = resolve(config.imports, join_path(import_path))
    except NoMatchError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    body = io.StringIO()
    render_import_tag(tag, body)
    click.echo(body.getvalue(), nl=False)


@cli.command()
@config_option
def check(config_path: Path | None) -> None:
    """Validate the configuration and list import mappings."""
    config = _load_config(config_path)

    if config.config_path is not None:
        click.echo(f"Configuration: {config.config_path}")
    else:
        click.echo("Configuration: defaults (no govanity.toml found)")

    for mapping in config.imports:
        kind = "wildcard" if mapping.wildcard else "exact"
        click.echo(f"  {mapping.from_path} -> {mapping.to} ({mapping.vcs}, {kind})")

    click.echo(
        click.style(f"{len(config.imports)} import mapping(s) OK", fg="green"),
    )


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with an error.

    Args:
        config_path: Explicit config file, or None to auto-discover

    Returns:
        Loaded configuration

    Raises:
        SystemExit: If the configuration is invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
