# Services module - external API integrations
from .steam import SteamClient

__all__ = ["SteamClient"]
