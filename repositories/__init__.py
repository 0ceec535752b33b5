"""
SQLAlchemy-based Repositories

This package provides async repository pattern using SQLAlchemy ORM.

Usage:
    from repositories import SentimentLogRepository
    from database import get_session

    async with get_session() as session:
        repo = SentimentLogRepository(session)
        recent = await repo.get_recent(since=cutoff, limit=100)
"""

from .base import BaseRepository
from .sentiment_logs import SentimentLogRepository
from .trending_topics import TrendingTopicRepository
from .intelligence_config import IntelligenceConfigRepository
from .alerts import AlertRepository

__all__ = [
    "BaseRepository",
    # Inputs
    "SentimentLogRepository",
    "TrendingTopicRepository",
    # Outputs
    "IntelligenceConfigRepository",
    "AlertRepository",
]
