"""
Data schemas for SteamCMD app info responses.
"""

import re
from dataclasses import dataclass
from typing import Any

from buildwatch.core.exceptions import (
    AppNotFoundError,
    BranchNotFoundError,
    FieldParseError,
    MalformedResponseError,
    UpstreamStatusError,
)
from buildwatch.models.build import DEFAULT_DESCRIPTION, BuildDescriptor

SUCCESS_STATUS = "success"


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# ASCII digits only; str.isdigit and int() also accept other scripts
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _require_mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedResponseError(f"Expected an object for {what}")
    return value


def _parse_int(raw: Any, field_name: str) -> int:
    """Parse a signed 64-bit integer given as a decimal string or JSON integer."""
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise FieldParseError(f"Field '{field_name}' is not an integer: {raw!r}")
    if isinstance(raw, str) and not _INTEGER_RE.fullmatch(raw):
        raise FieldParseError(f"Field '{field_name}' is not an integer: {raw!r}")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise FieldParseError(f"Field '{field_name}' is out of 64-bit range: {raw!r}")
    return value


@dataclass
class BranchInfo:
    """Raw branch entry under data.<app_id>.depots.branches."""

    buildid: str
    timeupdated: str = "0"
    description: str = DEFAULT_DESCRIPTION

    @classmethod
    def from_dict(cls, raw: Any) -> "BranchInfo":
        """Create from a decoded JSON object, applying field defaults."""
        entry = _require_mapping(raw, "branch entry")
        if "buildid" not in entry:
            raise MalformedResponseError("Branch entry has no 'buildid'")
        description = entry.get("description")
        if description is not None and not isinstance(description, str):
            raise MalformedResponseError("Branch entry 'description' is not a string")
        return cls(
            buildid=entry["buildid"],
            timeupdated=entry.get("timeupdated", "0"),
            description=description if description is not None else DEFAULT_DESCRIPTION,
        )

    def to_descriptor(self, branch: str) -> BuildDescriptor:
        """Convert to a BuildDescriptor, parsing the numeric fields."""
        return BuildDescriptor(
            branch=branch,
            build_id=_parse_int(self.buildid, "buildid"),
            timestamp=_parse_int(self.timeupdated, "timeupdated"),
            description=self.description,
        )


def extract_branch(payload: Any, app_id: int, branch: str) -> BranchInfo:
    """
    Locate a branch entry inside an app info payload.

    Args:
        payload: Decoded JSON body
        app_id: Application id the request was made for
        branch: Branch name to look up

    Returns:
        The branch entry

    Raises:
        MalformedResponseError: If the structure is not as expected
        UpstreamStatusError: If the API reported a failure status
        AppNotFoundError: If the app id is absent
        BranchNotFoundError: If the branch is absent
    """
    body = _require_mapping(payload, "response body")

    if "status" not in body:
        raise MalformedResponseError("Response has no 'status'")
    if body["status"] != SUCCESS_STATUS:
        raise UpstreamStatusError(f"API status: {body['status']}")

    data = _require_mapping(body.get("data"), "'data'")
    # JSON object keys are always strings
    if str(app_id) not in data:
        raise AppNotFoundError(f"App {app_id} not found in response")
    app = _require_mapping(data[str(app_id)], f"app {app_id}")

    depots = _require_mapping(app.get("depots"), f"app {app_id} depots")
    branches = _require_mapping(depots.get("branches"), f"app {app_id} branches")
    if branch not in branches:
        raise BranchNotFoundError(f"Branch '{branch}' not found for app {app_id}")

    return BranchInfo.from_dict(branches[branch])
