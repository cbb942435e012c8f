"""
Tests for the match history endpoint.

The Riot API is replaced by an httpx MockTransport so the whole pipeline
(dependencies, client, gateway, service, projection) runs for each request.
"""

from typing import Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from match_history.core.riot_api import RiotAPIClient
from match_history.features.matches.dependencies import get_app_settings, get_riot_client
from match_history.main import app

SUMMONER_PREFIX = "/lol/summoner/v4/summoners/by-name/"
MATCH_IDS_SUFFIX = "/ids"
MATCH_PREFIX = "/lol/match/v5/matches/"


class FakeRiotAPI:
    """Routes Riot API requests to canned responses and records them."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.summoner = lambda name: httpx.Response(200, json={"puuid": "test-puuid-123", "name": name})
        self.match_ids = lambda: httpx.Response(200, json=[])
        self.matches: Dict[str, Callable[[], httpx.Response]] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(SUMMONER_PREFIX):
            return self.summoner(path[len(SUMMONER_PREFIX):])
        if path.endswith(MATCH_IDS_SUFFIX):
            return self.match_ids()
        if path.startswith(MATCH_PREFIX):
            return self.matches[path[len(MATCH_PREFIX):]]()
        return httpx.Response(500, text="unexpected path")

    def detail_requests(self) -> List[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.url.path.startswith(MATCH_PREFIX) and not r.url.path.endswith(MATCH_IDS_SUFFIX)
        ]


@pytest.fixture
def riot_api():
    return FakeRiotAPI()


@pytest.fixture
def client(settings, riot_api):
    """Test client with settings and Riot transport overridden."""

    async def _get_riot_client():
        riot_client = RiotAPIClient(
            api_key=settings.riot_api_key, transport=httpx.MockTransport(riot_api)
        )
        try:
            yield riot_client
        finally:
            await riot_client.close()

    app.dependency_overrides[get_app_settings] = lambda: settings
    app.dependency_overrides[get_riot_client] = _get_riot_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_returns_five_summaries_in_listing_order(client, riot_api, match_ids, match_payload_factory):
    riot_api.match_ids = lambda: httpx.Response(200, json=match_ids)
    for match_id in match_ids:
        riot_api.matches[match_id] = (
            lambda match_id=match_id: httpx.Response(200, json=match_payload_factory(match_id))
        )

    response = client.get("/api/match-history", params={"summonerName": "TestPlayer"})

    assert response.status_code == 200
    body = response.json()
    assert "message" not in body
    assert [m["matchId"] for m in body["matches"]] == match_ids
    assert body["matches"][0] == {
        "matchId": match_ids[0],
        "gameMode": "CLASSIC",
        "win": True,
        "championName": "Zed",
        "kills": 12,
        "deaths": 2,
        "assists": 6,
    }
    assert len(riot_api.detail_requests()) == 5
    assert all(r.headers["X-Riot-Token"] == "RGAPI-test-key" for r in riot_api.requests)


def test_missing_participant_omits_player_fields(client, riot_api, match_payload_factory):
    riot_api.match_ids = lambda: httpx.Response(200, json=["NA1_1"])
    riot_api.matches["NA1_1"] = lambda: httpx.Response(
        200, json=match_payload_factory("NA1_1", puuid=None, game_mode="ARAM")
    )

    response = client.get("/api/match-history", params={"summonerName": "TestPlayer"})

    assert response.status_code == 200
    assert response.json() == {"matches": [{"matchId": "NA1_1", "gameMode": "ARAM"}]}


def test_empty_listing(client, riot_api):
    response = client.get("/api/match-history", params={"summonerName": "TestPlayer"})

    assert response.status_code == 200
    assert response.json() == {"matches": [], "message": "No recent matches found."}
    assert riot_api.detail_requests() == []


@pytest.mark.parametrize("params", [{}, {"summonerName": ""}, {"summonerName": "   "}])
def test_missing_summoner_name(client, riot_api, params):
    response = client.get("/api/match-history", params=params)

    assert response.status_code == 400
    assert response.json() == {"error": "Summoner name is required."}
    assert riot_api.requests == []


@pytest.mark.parametrize("params", [{}, {"summonerName": "TestPlayer"}])
def test_unconfigured_api_key(client, riot_api, unconfigured_settings, params):
    app.dependency_overrides[get_app_settings] = lambda: unconfigured_settings

    response = client.get("/api/match-history", params=params)

    assert response.status_code == 500
    assert response.json() == {"error": "API key is not configured."}
    assert riot_api.requests == []


def test_summoner_not_found(client, riot_api):
    riot_api.summoner = lambda name: httpx.Response(
        404, json={"status": {"message": "Data not found - summoner not found", "status_code": 404}}
    )

    response = client.get("/api/match-history", params={"summonerName": "Nobody Here"})

    assert response.status_code == 404
    assert response.json() == {"error": "Summoner 'Nobody Here' not found."}
    assert len(riot_api.requests) == 1


def test_summoner_without_puuid(client, riot_api):
    riot_api.summoner = lambda name: httpx.Response(200, json={"id": "s-1"})

    response = client.get("/api/match-history", params={"summonerName": "Ghost"})

    assert response.status_code == 404
    assert response.json() == {"error": "Summoner 'Ghost' not found."}
    assert len(riot_api.requests) == 1


@pytest.mark.parametrize("stage", ["summoner", "match_ids", "match"])
def test_forbidden_from_any_stage(client, riot_api, match_payload_factory, stage):
    forbidden = httpx.Response(403, json={"status": {"message": "Forbidden", "status_code": 403}})
    riot_api.match_ids = lambda: httpx.Response(200, json=["NA1_1"])
    riot_api.matches["NA1_1"] = lambda: httpx.Response(200, json=match_payload_factory("NA1_1"))
    if stage == "summoner":
        riot_api.summoner = lambda name: forbidden
    elif stage == "match_ids":
        riot_api.match_ids = lambda: forbidden
    else:
        riot_api.matches["NA1_1"] = lambda: forbidden

    response = client.get("/api/match-history", params={"summonerName": "TestPlayer"})

    assert response.status_code == 403
    assert response.json() == {
        "error": "Riot API Key forbidden. Check if it expired or is invalid."
    }


def test_detail_failure_fails_whole_request(client, riot_api, match_ids, match_payload_factory):
    riot_api.match_ids = lambda: httpx.Response(200, json=match_ids)
    for match_id in match_ids:
        riot_api.matches[match_id] = (
            lambda match_id=match_id: httpx.Response(200, json=match_payload_factory(match_id))
        )
    riot_api.matches[match_ids[3]] = lambda: httpx.Response(
        500, json={"status": {"message": "Internal server error", "status_code": 500}}
    )

    response = client.get("/api/match-history", params={"summonerName": "TestPlayer"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to fetch match history: Internal server error"
    }


def test_summoner_name_is_url_encoded(client, riot_api):
    client.get("/api/match-history", params={"summonerName": "Hide on bush"})

    assert riot_api.requests[0].url.raw_path.decode().endswith("/by-name/Hide%20on%20bush")


def test_versioned_route(client):
    response = client.get("/api/v1/match-history", params={"summonerName": "TestPlayer"})

    assert response.status_code == 200


def test_request_id_header(client):
    response = client.get(
        "/api/match-history",
        params={"summonerName": "TestPlayer"},
        headers={"X-Request-ID": "abc123"},
    )

    assert response.headers["X-Request-ID"] == "abc123"
    assert "X-Response-Time" in response.headers


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
