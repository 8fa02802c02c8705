"""
pgext-install — CLI entrypoint.

Usage:
    pgext-install --pg17
    pgext-install --pg18 --version v1.2.4
    pgext-install --pg17 --pkglibdir ~/pg/lib --sharedir ~/pg/share/extension
    python -m pgext_install.main --help
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from pgext_install import __version__
from pgext_install.core.errors import InstallError
from pgext_install.core.models.environment import ConfirmationRequest
from pgext_install.core.observability.logging_config import (
    FILE_ENV_VAR,
    FILE_LEVEL_ENV_VAR,
    resolve_level,
    setup_logging,
)


def _print_step(message: str) -> None:
    click.echo(f"{click.style('==>', fg='green')} {message}")


def _print_warning(message: str) -> None:
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def _ask_operator(request: ConfirmationRequest) -> bool:
    """Put a confirmation to whoever is at the terminal."""
    try:
        return click.confirm(request.prompt, default=request.default, err=True)
    except click.Abort:
        click.echo(err=True)
        return False


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(
    __version__, "--installer-version", prog_name="pgext-install",
    message="%(prog)s %(version)s",
)
@click.option("--pg17", is_flag=True, help="Install for PostgreSQL 17.")
@click.option("--pg18", is_flag=True, help="Install for PostgreSQL 18.")
@click.option(
    "--version", "version", default="latest", show_default=True, metavar="VER",
    help="Install specific version (e.g., v1.2.4).",
)
@click.option(
    "--pkglibdir", default=None, metavar="DIR",
    help="Custom directory for .so files (default: pg_config --pkglibdir).",
)
@click.option(
    "--sharedir", default=None, metavar="DIR",
    help="Custom directory for .control/.sql files (default: pg_config --sharedir/extension).",
)
@click.option(
    "--config", "-c", "config_path", type=click.Path(dir_okay=False), default=None,
    help="Installer settings YAML (default: $PGEXT_CONFIG).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(
    pg17: bool,
    pg18: bool,
    version: str,
    pkglibdir: str | None,
    sharedir: str | None,
    config_path: str | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Download and install a prebuilt PostgreSQL extension release."""
    from pgext_install.core.config.loader import load_settings
    from pgext_install.core.services.ext_install import install_extension, resolve_request

    try:
        # Validated before logging opens any file
        request = resolve_request(
            pg17=pg17, pg18=pg18, version=version, pkglibdir=pkglibdir, sharedir=sharedir,
        )
        setup_logging(
            level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
            log_file=os.environ.get(FILE_ENV_VAR),
            log_file_level=os.environ.get(FILE_LEVEL_ENV_VAR),
        )
        settings = load_settings(Path(config_path) if config_path else None)
        result = install_extension(
            request,
            settings,
            confirm=_ask_operator,
            on_step=None if (as_json or quiet) else _print_step,
            on_warning=_print_warning,
        )
    except InstallError as e:
        click.secho(f"Error: {e.message}", fg="red", err=True)
        sys.exit(e.exit_code)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if quiet:
        return

    click.echo()
    click.secho("Installation complete!", fg="green")
    click.echo()
    click.echo("To enable the extension in your database, run:")
    click.echo(f"  CREATE EXTENSION {settings.extension_name};")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
