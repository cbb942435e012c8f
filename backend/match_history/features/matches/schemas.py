"""Pydantic schemas for the match history endpoint."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

# Fields sourced from the requested player's participant entry. They are
# omitted from the body, not nulled, when the entry is missing.
PARTICIPANT_FIELDS = ("win", "champion_name", "kills", "deaths", "assists")

NO_RECENT_MATCHES_MESSAGE = "No recent matches found."


class MatchSummary(BaseModel):
    """Per-player summary of one match."""

    match_id: str = Field(..., alias="matchId", description="Riot match identifier")
    game_mode: Optional[str] = Field(None, alias="gameMode", description="Game mode")
    win: Optional[bool] = Field(None, description="Whether the player won")
    champion_name: Optional[str] = Field(
        None, alias="championName", description="Champion played"
    )
    kills: Optional[int] = None
    deaths: Optional[int] = None
    assists: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_serializer(mode="wrap")
    def _omit_missing_participant_fields(self, handler: Any) -> Dict[str, Any]:
        data = handler(self)
        for name in PARTICIPANT_FIELDS:
            key = MatchSummary.model_fields[name].alias or name
            for candidate in (key, name):
                if candidate in data and data[candidate] is None:
                    del data[candidate]
        return data


class MatchHistoryResponse(BaseModel):
    """Match history response body."""

    matches: List[MatchSummary] = Field(default_factory=list)
    message: Optional[str] = Field(
        None, description="Informational note, set when no matches were found"
    )

    @model_serializer(mode="wrap")
    def _omit_empty_message(self, handler: Any) -> Dict[str, Any]:
        data = handler(self)
        if data.get("message") is None:
            data.pop("message", None)
        return data

    @classmethod
    def empty(cls) -> "MatchHistoryResponse":
        """Response for a player with no recent matches."""
        return cls(matches=[], message=NO_RECENT_MATCHES_MESSAGE)


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str
