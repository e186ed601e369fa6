"""Command-line entry point: ``minigrep <query> <filename>``."""

import logging
import sys

import typer

from minigrep.app import FileReadError, run
from minigrep.config import Config, ConfigError, env_is_set
from minigrep.constants import APP_NAME, APP_VERSION, DEBUG_VAR, USAGE

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Print every line of a file that contains the query.",
    add_completion=False,
)

_ARGS_HELP = "The query followed by the file to search."
_ENV_HELP = "Set CASE_INSENSITIVE (any value) to ignore case."


def _configure_logging(verbose: bool) -> None:
    """Route the package's log records to stderr, replacing earlier handlers."""
    pkg_logger = logging.getLogger(APP_NAME)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.command(epilog=_ENV_HELP)
def main(
    args: list[str] | None = typer.Argument(  # noqa: B008
        None,
        metavar="QUERY FILENAME",
        help=_ARGS_HELP,
        show_default=False,
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log debug details to stderr.",
    ),
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Search a file for lines containing QUERY."""
    _configure_logging(verbose or env_is_set(DEBUG_VAR))

    # Positionals are collected loosely so the resolver reports what is missing.
    try:
        config = Config.from_args([APP_NAME, *(args or [])])
    except ConfigError as e:
        logger.debug("Configuration failed", exc_info=True)
        typer.echo(f"Problem parsing arguments: {e}", err=True)
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=1) from e

    logger.debug(
        "query=%r filename=%r case_sensitive=%s",
        config.query,
        config.filename,
        config.case_sensitive,
    )

    try:
        count = run(config)
    except FileReadError as e:
        logger.debug("Reading %s failed", e.filename, exc_info=True)
        typer.echo(f"Application error: {e}", err=True)
        raise typer.Exit(code=1) from e

    logger.debug("%d matching line(s)", count)


if __name__ == "__main__":
    app()
