"""Riot API constants and enum definitions."""

from enum import Enum

# Size of the recent-match window fetched per request.
MATCH_HISTORY_COUNT = 5

RIOT_TOKEN_HEADER = "X-Riot-Token"


class Region(str, Enum):
    """Riot API regions for regional (match-v5) routing."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


class Platform(str, Enum):
    """Riot API platforms for platform (summoner-v4) routing."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    PH2 = "ph2"
    RU = "ru"
    SG2 = "sg2"
    TH2 = "th2"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"
