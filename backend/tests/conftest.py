"""Shared fixtures for match history tests."""

from typing import Any, Callable, Dict, List, Optional

import pytest

from match_history.core.config import Settings

TEST_PUUID = "test-puuid-123"


def build_match_payload(
    match_id: str,
    puuid: Optional[str] = TEST_PUUID,
    game_mode: str = "CLASSIC",
    win: bool = True,
    champion_name: str = "Zed",
    kills: int = 12,
    deaths: int = 2,
    assists: int = 6,
) -> Dict[str, Any]:
    """Riot match-v5 payload with the given player plus one other participant."""
    participants: List[Dict[str, Any]] = [
        {
            "puuid": "other-puuid",
            "teamId": 200,
            "win": not win,
            "championName": "Ahri",
            "kills": 3,
            "deaths": 7,
            "assists": 4,
        }
    ]
    if puuid is not None:
        participants.append(
            {
                "puuid": puuid,
                "summonerName": "TestPlayer",
                "teamId": 100,
                "win": win,
                "championId": 238,
                "championName": champion_name,
                "kills": kills,
                "deaths": deaths,
                "assists": assists,
                "champLevel": 18,
                "goldEarned": 15000,
            }
        )
    return {
        "metadata": {
            "matchId": match_id,
            "dataVersion": "2",
            "participants": [p["puuid"] for p in participants],
        },
        "info": {
            "gameCreation": 1710000000000,
            "gameDuration": 1800,
            "queueId": 420,
            "mapId": 11,
            "gameMode": game_mode,
            "gameType": "MATCHED_GAME",
            "participants": participants,
            "platformId": "NA1",
        },
    }


@pytest.fixture
def match_payload_factory() -> Callable[..., Dict[str, Any]]:
    """Factory for Riot match payloads."""
    return build_match_payload


@pytest.fixture
def match_ids() -> List[str]:
    """Five recent match ids, newest first."""
    return [f"NA1_50000000{i}" for i in range(5)]


@pytest.fixture
def settings() -> Settings:
    """Settings with a test API key and no .env lookup."""
    return Settings(riot_api_key="RGAPI-test-key", _env_file=None)


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without an API key."""
    return Settings(riot_api_key=None, _env_file=None)


@pytest.fixture
def puuid() -> str:
    """PUUID of the requested player."""
    return TEST_PUUID
