"""Match history feature: endpoint, pipeline and projection."""

from .router import router
from .service import MatchHistoryService, map_riot_error
from .gateway import RiotMatchHistoryGateway
from .transformers import project_match_summary
from .schemas import MatchSummary, MatchHistoryResponse

__all__ = [
    "router",
    "MatchHistoryService",
    "map_riot_error",
    "RiotMatchHistoryGateway",
    "project_match_summary",
    "MatchSummary",
    "MatchHistoryResponse",
]
