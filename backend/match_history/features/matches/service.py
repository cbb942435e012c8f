"""Match history service: resolve, list, fan out, project."""

import structlog

from match_history.core.exceptions import (
    ExternalServiceError,
    ForbiddenCredentialError,
    ServiceException,
    SummonerNotFoundError,
)
from match_history.core.riot_api.constants import MATCH_HISTORY_COUNT
from match_history.core.riot_api.errors import RiotAPIError

from .gateway import RiotMatchHistoryGateway
from .schemas import MatchHistoryResponse
from .transformers import project_match_summary

logger = structlog.get_logger(__name__)


class MatchHistoryService:
    """Builds a player's recent match history from the Riot API.

    Stages run in order: summoner name to PUUID, PUUID to recent match ids,
    then all match records fetched concurrently. Any remote failure aborts
    the whole request; there are no partial results.
    """

    def __init__(
        self,
        gateway: RiotMatchHistoryGateway,
        match_count: int = MATCH_HISTORY_COUNT,
    ):
        """Initialize the service.

        :param gateway: Riot match history gateway
        :param match_count: Number of recent matches to summarize
        """
        self.gateway = gateway
        self.match_count = match_count

    async def get_match_history(self, summoner_name: str) -> MatchHistoryResponse:
        """Get recent match summaries for a summoner.

        :param summoner_name: Summoner display name
        :returns: Match summaries in listing order, or an empty result with a message
        :raises SummonerNotFoundError: If the name resolves to no PUUID
        :raises RiotAPIError: If any remote call fails
        """
        puuid = await self.gateway.resolve_puuid(summoner_name)
        if not puuid:
            raise SummonerNotFoundError(summoner_name)

        match_ids = await self.gateway.list_recent_match_ids(
            puuid, count=self.match_count
        )
        if not match_ids:
            logger.info("No recent matches", summoner_name=summoner_name)
            return MatchHistoryResponse.empty()

        matches = await self.gateway.fetch_matches(match_ids)
        summaries = [project_match_summary(match, puuid) for match in matches]

        logger.info(
            "Match history assembled",
            summoner_name=summoner_name,
            match_count=len(summaries),
        )
        return MatchHistoryResponse(matches=summaries)


def map_riot_error(error: RiotAPIError, summoner_name: str) -> ServiceException:
    """Classify a Riot API failure by its status code.

    404 from any stage means the summoner is unknown, 403 means the API key
    was rejected, everything else is a generic upstream failure.
    """
    if error.status_code == 404:
        return SummonerNotFoundError(summoner_name)
    if error.status_code == 403:
        return ForbiddenCredentialError()
    return ExternalServiceError(
        f"Failed to fetch match history: {error.message}",
        upstream_status=error.status_code,
        url=error.url,
    )
