"""
Sentiment Log Repository

Read access to the scored signals written by the upstream classifier.
"""
from datetime import datetime
from typing import Optional, List, Sequence, Tuple

from sqlalchemy import select, and_, desc, func

from database.models import SentimentLog
from .base import BaseRepository


class SentimentLogRepository(BaseRepository[SentimentLog]):
    """Repository for sentiment log queries."""

    model = SentimentLog

    # ============================================
    # SIGNAL WINDOWS
    # ============================================

    async def get_recent(
        self,
        since: datetime,
        limit: int = 100
    ) -> Sequence[SentimentLog]:
        """Get signals created since a point in time, most recent first."""
        stmt = (
            select(SentimentLog)
            .where(SentimentLog.created_at >= since)
            .order_by(desc(SentimentLog.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_average_sentiment(self, since: datetime) -> Optional[float]:
        """Mean of non-null sentiment scores since a point in time, None if no rows."""
        stmt = (
            select(func.avg(SentimentLog.sentiment_score))
            .where(
                and_(
                    SentimentLog.created_at >= since,
                    SentimentLog.sentiment_score.is_not(None)
                )
            )
        )
        result = await self.session.execute(stmt)
        average = result.scalar_one_or_none()
        return float(average) if average is not None else None

    # ============================================
    # PATTERN WINDOWS
    # ============================================

    async def get_regional_scores(
        self,
        start: datetime,
        end: datetime = None
    ) -> List[Tuple[str, float]]:
        """
        Get (region, sentiment_score) pairs in [start, end).

        Rows without a detected region or score are excluded.
        """
        conditions = [
            SentimentLog.created_at >= start,
            SentimentLog.region_detected.is_not(None),
            SentimentLog.sentiment_score.is_not(None),
        ]
        if end is not None:
            conditions.append(SentimentLog.created_at < end)

        stmt = (
            select(SentimentLog.region_detected, SentimentLog.sentiment_score)
            .where(and_(*conditions))
        )
        result = await self.session.execute(stmt)
        return [(row.region_detected, row.sentiment_score) for row in result.all()]

    async def get_emotional_tones(
        self,
        start: datetime,
        end: datetime = None
    ) -> List[List[str]]:
        """Get emotional tone tag lists of rows in [start, end) that carry one."""
        conditions = [
            SentimentLog.created_at >= start,
            SentimentLog.emotional_tone.is_not(None),
        ]
        if end is not None:
            conditions.append(SentimentLog.created_at < end)

        stmt = select(SentimentLog.emotional_tone).where(and_(*conditions))
        result = await self.session.execute(stmt)
        return [row.emotional_tone for row in result.all()]
