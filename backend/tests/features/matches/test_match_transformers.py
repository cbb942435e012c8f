"""Tests for match summary projection."""

from match_history.core.riot_api.models import MatchDTO
from match_history.features.matches.transformers import (
    find_participant,
    project_match_summary,
)


def test_projects_requested_player(match_payload_factory, puuid):
    match = MatchDTO.model_validate(match_payload_factory("NA1_1", win=False, kills=1))

    summary = project_match_summary(match, puuid)

    assert summary.match_id == "NA1_1"
    assert summary.game_mode == "CLASSIC"
    assert summary.win is False
    assert summary.champion_name == "Zed"
    assert (summary.kills, summary.deaths, summary.assists) == (1, 2, 6)


def test_missing_participant_leaves_player_fields_absent(match_payload_factory, puuid):
    match = MatchDTO.model_validate(
        match_payload_factory("NA1_2", puuid=None, game_mode="ARAM")
    )

    summary = project_match_summary(match, puuid)
    body = summary.model_dump(by_alias=True)

    assert body == {"matchId": "NA1_2", "gameMode": "ARAM"}
    assert summary.win is None
    assert summary.kills is None


def test_zero_and_false_values_are_kept(match_payload_factory, puuid):
    match = MatchDTO.model_validate(
        match_payload_factory("NA1_3", win=False, kills=0, deaths=0, assists=0)
    )

    body = project_match_summary(match, puuid).model_dump(by_alias=True)

    assert body["win"] is False
    assert body["kills"] == 0
    assert body["deaths"] == 0
    assert body["assists"] == 0


def test_null_participant_list_is_tolerated(match_payload_factory, puuid):
    payload = match_payload_factory("NA1_4")
    payload["info"]["participants"] = None
    match = MatchDTO.model_validate(payload)

    assert find_participant(match, puuid) is None
    assert project_match_summary(match, puuid).match_id == "NA1_4"


def test_projection_is_idempotent(match_payload_factory, puuid):
    match = MatchDTO.model_validate(match_payload_factory("NA1_5"))

    first = project_match_summary(match, puuid)
    second = project_match_summary(match, puuid)

    assert first == second
    assert first.model_dump(by_alias=True) == second.model_dump(by_alias=True)
