# Steam services - SteamCMD info API integration
from .client import SteamClient
from .schemas import BranchInfo

__all__ = ["SteamClient", "BranchInfo"]
