"""
Alert Emitter

Inserts one alert record summarizing a scored signal.
"""
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from constants import AlertType
from database.models import IntelligenceAlert
from repositories import AlertRepository
from .exceptions import InvalidSignalError
from .models import Signal


DESCRIPTION_LENGTH = 200


class AlertEmitter:
    """Writes high-priority signals to the alerts sink."""

    def __init__(self, session: AsyncSession):
        self.repo = AlertRepository(session)

    async def push(self, signal: Signal) -> IntelligenceAlert:
        """
        Insert an alert for a scored signal.

        Args:
            signal: Signal carrying at least urgency_level

        Returns:
            The created alert row
        """
        if not signal.urgency_level:
            raise InvalidSignalError("Signal urgency_level required for alert push")

        alert = await self.repo.create_alert(
            alert_type=AlertType.HIGH_PRIORITY_SIGNAL.value,
            severity=signal.urgency_level,
            title=f"{signal.urgency_level.upper()} Priority Signal Detected",
            description=signal.content_text[:DESCRIPTION_LENGTH] + "...",
            affected_regions=[signal.region_detected] if signal.region_detected else [],
            sentiment_data={
                "priority_score": signal.priority_score,
                "sentiment_score": signal.sentiment_score,
                "emotional_tone": signal.emotional_tone,
                "platform": signal.platform,
            },
            related_content_ids=[signal.id],
        )

        logger.info(f"Pushed signal {signal.id} to alerts system")
        return alert
