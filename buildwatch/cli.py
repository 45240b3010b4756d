"""``buildwatch [APP_ID] [BRANCH]`` — watch a Steam app branch for new builds.

Entry point: ``buildwatch`` (configured via pyproject.toml project.scripts).
Unset arguments fall back to BUILDWATCH_* environment variables and then
to the Settings defaults.
"""

import asyncio
from typing import Optional

import typer

from buildwatch.app import EXIT_CONFIG_ERROR, EXIT_OK, main
from buildwatch.core.config import load_settings
from buildwatch.core.exceptions import ConfigurationError
from buildwatch.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    name="buildwatch",
    help="Watch a Steam app branch and report when its published build changes.",
    add_completion=False,
)


@app.command()
def watch_cmd(
    app_id: Optional[str] = typer.Argument(
        None,
        help="Steam application id (default: 420).",
        show_default=False,
    ),
    branch: Optional[str] = typer.Argument(
        None,
        help="Branch name (default: public).",
        show_default=False,
    ),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        "-i",
        help="Seconds between checks (default: 30).",
        show_default=False,
    ),
    fail_fast: bool = typer.Option(
        False,
        "--fail-fast",
        help="Exit on the first fetch error instead of retrying next check.",
    ),
    once: bool = typer.Option(
        False,
        "--once",
        help="Run a single check and exit.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (default: INFO).",
        show_default=False,
    ),
) -> None:
    """Poll the SteamCMD API and report build changes until stopped."""
    try:
        settings = load_settings(
            app_id=app_id,
            branch=branch,
            poll_interval=interval,
            fail_fast=True if fail_fast else None,
            max_cycles=1 if once else None,
            log_level=log_level,
        )
    except ConfigurationError as exc:
        setup_logging()
        logger.error("ConfigurationError: %s", exc)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    try:
        status = asyncio.run(main(settings))
    except KeyboardInterrupt:
        status = EXIT_OK

    if status != EXIT_OK:
        raise typer.Exit(code=status)
