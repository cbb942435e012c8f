"""Riot API HTTP client with authentication and error normalization."""

from typing import Any, Dict, List, Optional

import httpx
import structlog
from pydantic import ValidationError as PydanticValidationError

from .constants import MATCH_HISTORY_COUNT, RIOT_TOKEN_HEADER
from .endpoints import RiotAPIEndpoints
from .errors import RiotAPIError, error_for_status
from .models import MatchDTO, SummonerDTO

logger = structlog.get_logger(__name__)


class RiotAPIClient:
    """Async Riot API client.

    Every request carries the API key header. Failures are raised as
    RiotAPIError subclasses after a single attempt; there is no retry.
    """

    def __init__(
        self,
        api_key: str,
        endpoints: Optional[RiotAPIEndpoints] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            api_key: Riot API key
            endpoints: URL builder (platform/region/lookup path)
            timeout: Transport timeout in seconds
            transport: Optional httpx transport, used to stub the network
        """
        if not api_key:
            raise ValueError("api_key is required")
        self.api_key = api_key
        self.endpoints = endpoints or RiotAPIEndpoints()
        self.timeout = timeout
        self.transport = transport

        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            headers = {
                RIOT_TOKEN_HEADER: self.api_key,
                "Accept": "application/json",
                "User-Agent": "MatchHistoryService/1.0",
            }
            self.session = httpx.AsyncClient(
                headers=headers,
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
            )
            logger.debug(
                "Riot API client session started",
                platform=self.endpoints.platform,
                region=self.endpoints.region,
            )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.debug("Riot API client session closed")

    async def fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Issue one authenticated GET and return the decoded JSON body.

        Args:
            url: Request URL
            params: Query parameters

        Returns:
            Decoded JSON value

        Raises:
            RiotAPIError: On a non-2xx status or a transport failure
        """
        await self.start_session()
        if self.session is None:
            raise RiotAPIError("Session not initialized", url=url)

        try:
            response = await self.session.get(url, params=params)
        except httpx.RequestError as e:
            logger.error(
                "Riot API transport failure",
                url=url,
                status_code=None,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise RiotAPIError(
                f"Request failed: {str(e) or type(e).__name__}", url=url
            ) from e

        if not response.is_success:
            raise self._error_from_response(response, url)

        logger.debug("Riot API request succeeded", url=url, status_code=response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise RiotAPIError(
                "Invalid JSON in response body",
                status_code=response.status_code,
                url=url,
            ) from e

    @staticmethod
    def _error_from_response(response: httpx.Response, url: str) -> RiotAPIError:
        """Turn a non-2xx response into a typed error and log the body."""
        body_text = response.text
        response_data: Dict[str, Any] = {}
        message = response.reason_phrase or f"HTTP {response.status_code}"

        try:
            parsed = response.json()
        except ValueError:
            parsed = None

        if isinstance(parsed, dict):
            response_data = parsed
            status_block = parsed.get("status")
            if isinstance(status_block, dict) and status_block.get("message"):
                message = str(status_block["message"])
            elif parsed.get("message"):
                message = str(parsed["message"])

        logger.error(
            "Riot API request failed",
            url=url,
            status_code=response.status_code,
            response_body=body_text[:500],
        )
        return error_for_status(
            response.status_code, message, response_data=response_data, url=url
        )

    # Summoner endpoints
    async def get_summoner_by_name(self, summoner_name: str) -> SummonerDTO:
        """Resolve a summoner name to its summoner record (carries the PUUID)."""
        url = self.endpoints.summoner_by_name(summoner_name)
        response = await self.fetch_json(url)
        if not isinstance(response, dict):
            return SummonerDTO()
        return SummonerDTO.model_validate(response)

    # Match endpoints
    async def get_match_ids_by_puuid(
        self, puuid: str, count: int = MATCH_HISTORY_COUNT
    ) -> List[str]:
        """Recent match ids for a PUUID, most recent first."""
        url = self.endpoints.match_ids_by_puuid(puuid)
        response = await self.fetch_json(
            url, params=self.endpoints.match_ids_params(count)
        )
        if not response:
            return []
        if not isinstance(response, list):
            raise RiotAPIError(
                f"Expected list response for match ids, got {type(response).__name__}",
                url=url,
            )
        return [str(match_id) for match_id in response]

    async def get_match(self, match_id: str) -> MatchDTO:
        """Get match details by match ID."""
        url = self.endpoints.match_by_id(match_id)
        response = await self.fetch_json(url)
        try:
            return MatchDTO.model_validate(response)
        except PydanticValidationError as e:
            raise RiotAPIError(
                f"Unexpected match payload for {match_id}: {e.error_count()} invalid field(s)",
                url=url,
            ) from e
