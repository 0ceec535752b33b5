"""
Threshold Adapter

Scales the persisted urgency, relevance and sensitivity thresholds by an
adjustment factor derived from sentiment drift:

    |drift| > 0.5  ->  0.8x   (high volatility, lower thresholds)
    |drift| > 0.3  ->  0.9x
    |drift| < 0.1  ->  1.1x   (stability, raise thresholds)
    otherwise      ->  1.0x

Results are clamped to safe ranges and persisted as the active config.
"""
from datetime import datetime

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from constants import ConfigKey, ConfigType
from repositories import IntelligenceConfigRepository
from .models import ThresholdConfig


URGENCY_RANGE = (0.5, 0.9)
RELEVANCE_RANGE = (0.4, 0.8)
SENSITIVITY_RANGE = (0.2, 0.5)

THRESHOLDS_DESCRIPTION = "Auto-adjusting intelligence processing thresholds"


def adjustment_factor(drift: float) -> float:
    """Multiplier applied to all thresholds for a given drift."""
    magnitude = abs(drift)
    if magnitude > 0.5:
        return 0.8
    if magnitude > 0.3:
        return 0.9
    if magnitude < 0.1:
        return 1.1
    return 1.0


def _clamp(value: float, bounds: tuple) -> float:
    low, high = bounds
    return max(low, min(high, value))


def scale_thresholds(config: ThresholdConfig, factor: float) -> ThresholdConfig:
    """Return a new config with every threshold scaled and clamped."""
    return ThresholdConfig(
        urgency_threshold=_clamp(config.urgency_threshold * factor, URGENCY_RANGE),
        relevance_threshold=_clamp(config.relevance_threshold * factor, RELEVANCE_RANGE),
        pattern_sensitivity=_clamp(config.pattern_sensitivity * factor, SENSITIVITY_RANGE),
        last_updated=config.last_updated,
        drift_factor=config.drift_factor,
    )


class ThresholdAdapter:
    """Reads and adapts the persisted intelligence thresholds."""

    def __init__(self, session: AsyncSession):
        self.repo = IntelligenceConfigRepository(session)

    async def current(self) -> ThresholdConfig:
        """Active thresholds, or the defaults when none are stored."""
        stored = await self.repo.get_value(ConfigKey.THRESHOLDS.value)
        return ThresholdConfig.from_dict(stored)

    async def update(self, current_drift: float) -> ThresholdConfig:
        """
        Adapt thresholds to the observed drift and persist them.

        Args:
            current_drift: Signed aggregate sentiment drift

        Returns:
            The newly active ThresholdConfig
        """
        base = await self.current()
        factor = adjustment_factor(current_drift)

        updated = scale_thresholds(base, factor)
        updated.last_updated = datetime.now()
        updated.drift_factor = current_drift

        await self.repo.upsert(
            ConfigKey.THRESHOLDS.value,
            updated.to_dict(),
            config_type=ConfigType.SYSTEM.value,
            description=THRESHOLDS_DESCRIPTION,
        )

        logger.info(
            f"Thresholds updated (drift={current_drift:+.3f}, factor={factor}): "
            f"urgency={updated.urgency_threshold:.3f}, relevance={updated.relevance_threshold:.3f}, "
            f"sensitivity={updated.pattern_sensitivity:.3f}"
        )
        return updated
