"""
Two-slot history of observed builds.
"""

from collections import deque

from buildwatch.models.build import BuildDescriptor


class History:
    """
    Current and previous build of the watched branch.

    Stored as a ring of two slots: pushing a new build evicts the oldest,
    so the old current becomes previous in a single step.
    """

    CAPACITY = 2

    def __init__(self):
        self._ring: deque[BuildDescriptor] = deque(maxlen=self.CAPACITY)

    @property
    def current(self) -> BuildDescriptor | None:
        """Most recently observed build, or None before the first observation."""
        return self._ring[-1] if self._ring else None

    @property
    def previous(self) -> BuildDescriptor | None:
        """Build that was current before the last change, or None."""
        return self._ring[0] if len(self._ring) == self.CAPACITY else None

    def observe(self, build: BuildDescriptor) -> bool:
        """
        Apply a new observation.

        The first observation fills the current slot. Later ones shift the
        ring only when the build id differs from the current one; other
        fields are not compared.

        Returns:
            True if a change of build was detected
        """
        current = self.current
        if current is None:
            self._ring.append(build)
            return False
        if current.build_id == build.build_id:
            return False
        self._ring.append(build)
        return True

    def render(self) -> str:
        """Render both slots, substituting the placeholder for empty ones."""
        placeholder = BuildDescriptor.placeholder()
        current = self.current or placeholder
        previous = self.previous or placeholder
        return f"Current build:\n\t{current}\nPrevious build:\n\t{previous}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return (self.current, self.previous) == (other.current, other.previous)

    def __repr__(self) -> str:
        return f"History(current={self.current!r}, previous={self.previous!r})"
