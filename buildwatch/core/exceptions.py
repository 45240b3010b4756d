"""
Custom application exceptions.
"""


class BuildWatchError(Exception):
    """Base exception for buildwatch errors."""
    pass


class ConfigurationError(BuildWatchError):
    """Settings could not be resolved."""
    pass


class SteamAPIError(BuildWatchError):
    """Fetching the build descriptor failed."""
    pass


class TransportError(SteamAPIError):
    """Network failure or non-success HTTP status."""
    pass


class MalformedResponseError(SteamAPIError):
    """Response body does not have the expected structure."""
    pass


class UpstreamStatusError(SteamAPIError):
    """API answered with a status other than "success"."""
    pass


class MissingEntityError(SteamAPIError):
    """Requested entity is absent from a well-formed response."""
    pass


class AppNotFoundError(MissingEntityError):
    """Application id not present in the response."""
    pass


class BranchNotFoundError(MissingEntityError):
    """Branch not present under the application."""
    pass


class FieldParseError(SteamAPIError):
    """Build id or timestamp is not an integer."""
    pass
