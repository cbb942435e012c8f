"""Gateway to the Riot summoner and match endpoints.

Keeps the pipeline stages (identity resolution, match listing, detail
fan-out) independent of the HTTP client so the service can be tested
against a fake gateway.
"""

import asyncio
from typing import TYPE_CHECKING, List, Optional

import structlog

from match_history.core.riot_api.constants import MATCH_HISTORY_COUNT
from match_history.core.riot_api.models import MatchDTO

if TYPE_CHECKING:
    from match_history.core.riot_api.client import RiotAPIClient

logger = structlog.get_logger(__name__)


class RiotMatchHistoryGateway:
    """Gateway to Riot API for the match history pipeline."""

    def __init__(self, riot_client: "RiotAPIClient"):
        """Initialize gateway with Riot API client.

        :param riot_client: Authenticated Riot API client
        """
        self.riot_client = riot_client

    async def resolve_puuid(self, summoner_name: str) -> Optional[str]:
        """Resolve a summoner name to a PUUID.

        :param summoner_name: Display name as supplied by the caller
        :returns: PUUID, or None when the lookup response carries none
        :raises RiotAPIError: If the lookup request fails
        """
        summoner = await self.riot_client.get_summoner_by_name(summoner_name)
        return summoner.puuid or None

    async def list_recent_match_ids(
        self, puuid: str, count: int = MATCH_HISTORY_COUNT
    ) -> List[str]:
        """Most recent match ids for a player, newest first."""
        match_ids = await self.riot_client.get_match_ids_by_puuid(puuid, count=count)
        return match_ids[:count]

    async def fetch_matches(self, match_ids: List[str]) -> List[MatchDTO]:
        """Fetch match records concurrently, preserving the order of ``match_ids``.

        All fetches run in one task group. The first failure cancels the
        fetches still in flight and is re-raised as is.

        :raises RiotAPIError: From the first fetch that failed
        """
        if not match_ids:
            return []

        try:
            async with asyncio.TaskGroup() as task_group:
                tasks = [
                    task_group.create_task(self.riot_client.get_match(match_id))
                    for match_id in match_ids
                ]
        except ExceptionGroup as group:
            logger.warning(
                "Match detail fetch aborted",
                requested=len(match_ids),
                failed=len(group.exceptions),
            )
            raise group.exceptions[0]

        return [task.result() for task in tasks]
