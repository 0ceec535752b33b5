"""
Trending Topic Repository

Read access to topics tracked by the trend detector.
"""
from datetime import datetime
from typing import Sequence

from sqlalchemy import select, and_, desc

from database.models import TrendingTopic
from .base import BaseRepository


class TrendingTopicRepository(BaseRepository[TrendingTopic]):
    """Repository for trending topic queries."""

    model = TrendingTopic

    async def get_emerging(
        self,
        since: datetime,
        limit: int = 5
    ) -> Sequence[TrendingTopic]:
        """Get topics first detected since a point in time, highest volume first."""
        stmt = (
            select(TrendingTopic)
            .where(
                and_(
                    TrendingTopic.first_detected_at >= since,
                    TrendingTopic.volume_score.is_not(None)
                )
            )
            .order_by(desc(TrendingTopic.volume_score))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
