"""Riot API endpoint definitions and routing information."""

from typing import Optional
from urllib.parse import quote

from .constants import MATCH_HISTORY_COUNT, Platform, Region

DEFAULT_SUMMONER_LOOKUP_PATH = "/lol/summoner/v4/summoners/by-name/{summoner_name}"


class RiotAPIEndpoints:
    """Builds Riot API URLs for the platform and regional routing hosts."""

    def __init__(
        self,
        region: Region = Region.AMERICAS,
        platform: Platform = Platform.NA1,
        summoner_lookup_path: str = DEFAULT_SUMMONER_LOOKUP_PATH,
    ):
        """
        Initialize endpoint configuration.

        Args:
            region: Regional routing value for match endpoints
            platform: Platform routing value for summoner lookup
            summoner_lookup_path: Path template containing ``{summoner_name}``
        """
        self.region = region
        self.platform = platform
        self.summoner_lookup_path = summoner_lookup_path

    def get_base_url(self, region: Optional[Region] = None) -> str:
        """Get base URL for regional endpoints."""
        region = region or self.region
        region_str = region.value if isinstance(region, Region) else region
        return f"https://{region_str}.api.riotgames.com"

    def get_platform_url(self, platform: Optional[Platform] = None) -> str:
        """Get base URL for platform endpoints."""
        platform = platform or self.platform
        platform_str = platform.value if isinstance(platform, Platform) else platform
        return f"https://{platform_str}.api.riotgames.com"

    # Summoner endpoints (Platform)
    def summoner_by_name(self, summoner_name: str) -> str:
        """Summoner lookup URL; the name is percent-encoded, slashes included."""
        path = self.summoner_lookup_path.format(
            summoner_name=quote(summoner_name, safe="")
        )
        return f"{self.get_platform_url()}{path}"

    # Match endpoints (Regional)
    def match_ids_by_puuid(self, puuid: str) -> str:
        """Match id listing URL (query parameters are passed separately)."""
        return f"{self.get_base_url()}/lol/match/v5/matches/by-puuid/{puuid}/ids"

    @staticmethod
    def match_ids_params(count: int = MATCH_HISTORY_COUNT) -> dict:
        """Query parameters for the match id listing."""
        return {"count": count}

    def match_by_id(self, match_id: str) -> str:
        """Match detail URL."""
        return f"{self.get_base_url()}/lol/match/v5/matches/{match_id}"
