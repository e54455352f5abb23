"""Entry point: python -m hono_scaffold APP_NAME --spec openapi.yaml

Scaffolds a Hono application into ./APP_NAME.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from .emitter import ScaffoldOptions, scaffold
from .errors import ScaffoldError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "HONO_SCAFFOLD_LOG_LEVEL"


def configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command(name="create-hono-app")
@click.argument("app_name")
@click.option("-s", "--spec", "spec_path", required=True, type=click.Path(path_type=Path), help="OpenAPI specification file path.")
@click.option("-c", "--cors", is_flag=True, help="Enable CORS.")
@click.option("-a", "--auth", is_flag=True, help="Enable JWT auth.")
@click.option("-v", "--verbose", is_flag=True, help="Log every generated file.")
def main(app_name: str, spec_path: Path, cors: bool, auth: bool, verbose: bool):
    """Scaffold a Hono app from an OpenAPI spec file."""
    configure_logging(verbose)
    options = ScaffoldOptions(app_name=app_name, spec_path=spec_path, cors=cors, auth=auth)

    click.echo(f"Creating Hono application from {spec_path}...")
    try:
        scaffold(options)
    except ScaffoldError as exc:
        click.echo("Failed to create application", err=True)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        click.echo("Failed to create application", err=True)
        click.echo(f"Error: {type(exc).__name__}: {exc}", err=True)
        raise SystemExit(1)

    click.echo(f'Generated "{app_name}"')
    click.echo("\nNext steps:")
    click.echo(f"  cd {app_name}")
    click.echo("  pnpm install")
    click.echo("  pnpm db:generate")
    click.echo("  pnpm db:migrate")
    click.echo("  pnpm dev")


if __name__ == "__main__":
    main()
