"""Projection of Riot match records into per-player summaries."""

from typing import Optional

import structlog

from match_history.core.riot_api.models import MatchDTO, ParticipantDTO

from .schemas import MatchSummary

logger = structlog.get_logger(__name__)


def find_participant(match: MatchDTO, puuid: str) -> Optional[ParticipantDTO]:
    """Return the participant entry for ``puuid``, or None if the match lacks one."""
    for participant in match.info.participants:
        if participant.puuid == puuid:
            return participant
    return None


def project_match_summary(match: MatchDTO, puuid: str) -> MatchSummary:
    """Project a match record down to the requested player's summary.

    The participant entry can be missing for partially ingested matches.
    In that case only the match-level fields are filled in; the player
    fields stay unset rather than defaulted.
    """
    participant = find_participant(match, puuid)
    if participant is None:
        logger.info(
            "Player not among match participants",
            match_id=match.match_id,
            participant_count=len(match.info.participants),
        )
        return MatchSummary(match_id=match.match_id, game_mode=match.info.game_mode)

    return MatchSummary(
        match_id=match.match_id,
        game_mode=match.info.game_mode,
        win=participant.win,
        champion_name=participant.champion_name,
        kills=participant.kills,
        deaths=participant.deaths,
        assists=participant.assists,
    )
