"""Pydantic models for Riot API response data.

Only the fields the match history projection reads are declared; everything
else in the payload is ignored. Participant fields are optional because the
remote side can return partially ingested matches.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _RiotDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SummonerDTO(_RiotDTO):
    """Summoner lookup response."""

    puuid: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    summoner_level: Optional[int] = Field(None, alias="summonerLevel")


class ParticipantDTO(_RiotDTO):
    """Match participant information."""

    puuid: Optional[str] = None
    win: Optional[bool] = None
    champion_name: Optional[str] = Field(None, alias="championName")
    kills: Optional[int] = None
    deaths: Optional[int] = None
    assists: Optional[int] = None


class MatchMetadataDTO(_RiotDTO):
    """Match metadata."""

    match_id: str = Field(..., alias="matchId")


class MatchInfoDTO(_RiotDTO):
    """Match-level information."""

    game_mode: Optional[str] = Field(None, alias="gameMode")
    participants: List[ParticipantDTO] = Field(default_factory=list)

    @field_validator("participants", mode="before")
    @classmethod
    def _null_participants(cls, v: object) -> object:
        return [] if v is None else v


class MatchDTO(_RiotDTO):
    """Full match record."""

    metadata: MatchMetadataDTO
    info: MatchInfoDTO

    @property
    def match_id(self) -> str:
        return self.metadata.match_id
