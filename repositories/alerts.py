"""
Alert Repository

Insert-only sink for intelligence alerts.
"""
from typing import List

from database.models import IntelligenceAlert
from .base import BaseRepository


class AlertRepository(BaseRepository[IntelligenceAlert]):
    """Repository for alert records."""

    model = IntelligenceAlert

    async def create_alert(
        self,
        alert_type: str,
        severity: str,
        title: str,
        description: str = None,
        affected_regions: List[str] = None,
        sentiment_data: dict = None,
        related_content_ids: List[str] = None,
        auto_generated: bool = True,
    ) -> IntelligenceAlert:
        """Create a new alert."""
        alert = IntelligenceAlert(
            id=self.generate_id("alert"),
            alert_type=alert_type,
            severity=severity,
            title=title,
            description=description,
            affected_regions=affected_regions or [],
            sentiment_data=sentiment_data or {},
            related_content_ids=related_content_ids or [],
            auto_generated=auto_generated,
            acknowledged=False,
            created_at=self.now(),
        )

        return await self.add(alert)
