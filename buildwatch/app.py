"""
Application factory and main entry point.
"""

import asyncio
import signal

from buildwatch.core.config import Settings
from buildwatch.core.exceptions import SteamAPIError
from buildwatch.core.logging import get_logger, setup_logging
from buildwatch.services.steam import SteamClient
from buildwatch.watcher import BuildWatcher

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FETCH_ERROR = 1
EXIT_CONFIG_ERROR = 2


def create_watcher(settings: Settings) -> BuildWatcher:
    """Create a BuildWatcher wired to the Steam API."""
    client = SteamClient(settings.api_base_url, timeout=settings.request_timeout)
    return BuildWatcher(client, settings)


def _install_signal_handlers(stop_event: asyncio.Event) -> list[signal.Signals]:
    loop = asyncio.get_running_loop()
    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
            installed.append(sig)
        except (NotImplementedError, RuntimeError):
            # Windows event loops have no signal handler support
            logger.debug("Signal handler for %s not installed", sig)
    return installed


async def main(settings: Settings) -> int:
    """Main application entry point. Returns the process exit status."""
    setup_logging(settings.log_level)
    logger.info("Starting buildwatch...")

    watcher = create_watcher(settings)
    stop_event = asyncio.Event()
    installed = _install_signal_handlers(stop_event)

    try:
        await watcher.run(stop_event)
    except SteamAPIError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return EXIT_FETCH_ERROR
    finally:
        loop = asyncio.get_running_loop()
        for sig in installed:
            loop.remove_signal_handler(sig)

    return EXIT_OK
