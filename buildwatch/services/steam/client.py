"""
SteamCMD info API client.
"""

import httpx

from buildwatch.core.exceptions import MalformedResponseError, TransportError
from buildwatch.core.logging import get_logger
from buildwatch.models.build import BuildDescriptor
from .schemas import extract_branch

logger = get_logger(__name__)


class SteamClient:
    """Client for the public SteamCMD app info API."""

    BASE_URL = "https://api.steamcmd.net/v1"

    def __init__(self, base_url: str = BASE_URL, timeout: float = 10.0):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def fetch_build_descriptor(self, app_id: int, branch: str) -> BuildDescriptor:
        """
        Fetch the build currently published on a branch.

        Args:
            app_id: Steam application id
            branch: Branch name, e.g. "public"

        Returns:
            Descriptor of the published build

        Raises:
            TransportError: If the request fails or returns an error status
            MalformedResponseError: If the body is not the expected JSON
            UpstreamStatusError: If the API reports a failure status
            AppNotFoundError: If the app is missing from the response
            BranchNotFoundError: If the branch is missing from the app
            FieldParseError: If build id or timestamp is not an integer
        """
        url = f"{self._base_url}/info/{app_id}"
        logger.debug("Fetching %s", url)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(f"Steam API error: {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Steam API request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError("Steam API returned invalid JSON") from exc

        return extract_branch(payload, app_id, branch).to_descriptor(branch)
