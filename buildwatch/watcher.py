"""
Polling loop that detects build changes on the watched branch.
"""

import asyncio
from collections.abc import Callable
from datetime import datetime, timezone

from buildwatch.core.config import Settings
from buildwatch.core.exceptions import SteamAPIError
from buildwatch.core.logging import get_logger
from buildwatch.models.build import BuildDescriptor
from buildwatch.services.steam import SteamClient
from buildwatch.state.history import History

logger = get_logger(__name__)

CHECK_TIME_FORMAT = "%d/%m/%Y %H:%M:%S"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _published(build: BuildDescriptor) -> str:
    try:
        return build.published_at.isoformat()
    except (OverflowError, OSError, ValueError):
        # outside the range datetime can represent
        return str(build.timestamp)


class BuildWatcher:
    """Fetches the published build on a fixed interval and tracks changes."""

    def __init__(
        self,
        client: SteamClient,
        settings: Settings,
        history: History | None = None,
        report: Callable[[str], None] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._client = client
        self._settings = settings
        self._report = report or logger.info
        self._clock = clock
        self.history = history if history is not None else History()

    async def run_cycle(self) -> bool:
        """
        Perform a single check.

        Returns:
            True if the build changed during this check

        Raises:
            SteamAPIError: Only when fail_fast is enabled
        """
        started = self._clock()
        self._report(f"[{started.strftime(CHECK_TIME_FORMAT)}] Check started")

        try:
            build = await self._client.fetch_build_descriptor(
                self._settings.app_id,
                self._settings.branch,
            )
        except SteamAPIError as exc:
            if self._settings.fail_fast:
                raise
            logger.error("Check failed (%s): %s", type(exc).__name__, exc)
            return False

        last = self.history.current
        changed = self.history.observe(build)
        if changed:
            logger.warning(
                "Build changed on %s: %s -> %s (published %s)",
                build.branch,
                last.build_id,
                build.build_id,
                _published(build),
            )
        elif last is not None and last != build:
            logger.debug("Metadata of build %s changed, build id unchanged", build.build_id)

        self._report(self.history.render())
        return changed

    async def run(self, stop_event: asyncio.Event | None = None) -> int:
        """
        Poll until stop_event is set or max_cycles checks have run.

        Args:
            stop_event: Set it to stop the loop; it also interrupts the sleep

        Returns:
            Number of completed checks
        """
        if stop_event is None:
            stop_event = asyncio.Event()
        max_cycles = self._settings.max_cycles
        cycles = 0

        logger.info(
            "Watching app %s branch '%s' every %ss",
            self._settings.app_id,
            self._settings.branch,
            self._settings.poll_interval,
        )

        while not stop_event.is_set():
            await self.run_cycle()
            cycles += 1
            if max_cycles and cycles >= max_cycles:
                break
            if await self._sleep(stop_event):
                break

        logger.info("Watcher stopped after %d check(s)", cycles)
        return cycles

    async def _sleep(self, stop_event: asyncio.Event) -> bool:
        """Wait one poll interval. Returns True if stopped while waiting."""
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=self._settings.poll_interval)
        except asyncio.TimeoutError:
            return False
        return True
