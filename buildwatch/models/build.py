"""
Data model for an observed build.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

DEFAULT_DESCRIPTION = "No description"


@dataclass(frozen=True)
class BuildDescriptor:
    """Snapshot of the build published on a branch at one point in time."""

    branch: str
    build_id: int
    timestamp: int
    description: str = DEFAULT_DESCRIPTION

    @classmethod
    def placeholder(cls) -> "BuildDescriptor":
        """Descriptor shown in place of a slot that holds no build yet."""
        return cls(branch="none", build_id=0, timestamp=0)

    @property
    def published_at(self) -> datetime:
        """Publication time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def render(self) -> str:
        return (
            f"Branch: {self.branch}; Build ID: {self.build_id}; "
            f"Timestamp: {self.timestamp}; Description: {self.description}"
        )

    def __str__(self) -> str:
        return self.render()
