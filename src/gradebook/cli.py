"""CLI entry point for the grading system."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from gradebook import __version__
from gradebook.config import ConfigError, resolve_config
from gradebook.console import ConsoleApp
from gradebook.logging import setup_console_logging, setup_logging
from gradebook.service import GradingService

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to gradebook.yaml (auto-detected if not specified)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log at DEBUG level and echo log lines to stderr",
)
@click.version_option(version=__version__, prog_name="gradebook")
def main(config_path: Path | None, verbose: bool) -> None:
    """Student grading system - interactive menu."""
    try:
        config = resolve_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    level = "DEBUG" if verbose else config.logging.level
    try:
        setup_logging(log_dir=config.log_path, level=level, console=verbose)
    except OSError as e:
        setup_console_logging(level=level, console=verbose)
        click.secho(f"Warning: file logging disabled ({e})", fg="yellow", err=True)

    try:
        service = GradingService.from_config(config)
        logger.info(
            "Loaded %d students from %s", len(service.registry), config.records_path
        )
        ConsoleApp(service).run()
    except click.Abort:
        # Ctrl-C or end of input at a prompt
        click.echo("\nGoodbye.")
    except Exception as e:
        logger.exception("Unexpected error")
        click.secho(f"Fatal error: {e}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
