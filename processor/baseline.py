"""
Baseline Estimator

Trailing-window mean sentiment used as the reference point for drift
and priority scoring.
"""
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from repositories import SentimentLogRepository


class BaselineEstimator:
    """Computes the mean of non-null sentiment scores over a trailing window."""

    def __init__(self, session: AsyncSession):
        self.repo = SentimentLogRepository(session)

    async def calculate(self, days: int = 7, now: datetime = None) -> float:
        """
        Mean sentiment over the last `days` days.

        Args:
            days: Window length in days
            now: End of the window (defaults to current time)

        Returns:
            Mean sentiment, or 0.0 when the window is empty
        """
        now = now or datetime.now()
        average = await self.repo.get_average_sentiment(since=now - timedelta(days=days))
        return average if average is not None else 0.0
