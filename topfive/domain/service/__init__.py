"""Domain services."""

from .base import Service
from .counter_ledger import CounterLedger
from .jwt_service import JWTService
from .locks import ResourceLockRegistry
from .ranking_service import RankedResource, RankingService
from .score_engine import ScoreEngine, confidence_score, hot_score
from .vote_coordinator import VoteCoordinator
from .vote_store import VoteStore

__all__ = [
    "CounterLedger",
    "JWTService",
    "RankedResource",
    "RankingService",
    "ResourceLockRegistry",
    "ScoreEngine",
    "Service",
    "VoteCoordinator",
    "VoteStore",
    "confidence_score",
    "hot_score",
]
