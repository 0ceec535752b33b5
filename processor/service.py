"""
Signal Intelligence Service

Entry points shared by the API and the scheduler:
- analyze_signals: full orchestrated run
- push_to_alerts: insert one alert for a scored signal
- update_thresholds: adapt thresholds to an explicit drift
- run_cycle: scheduled tick (analyze, alert on top signals, adapt thresholds)
"""
from typing import Callable, Optional

from loguru import logger

from config import settings
from constants import UrgencyLevel
from database.session import get_session
from .alerts import AlertEmitter
from .models import Signal, ThresholdConfig, AnalysisResult
from .pipeline import SignalIntelligencePipeline
from .thresholds import ThresholdAdapter


ALERTABLE_URGENCY = frozenset({UrgencyLevel.CRITICAL.value, UrgencyLevel.HIGH.value})


class SignalIntelligenceService:
    """Facade over the pipeline, the alert emitter and the threshold adapter."""

    def __init__(
        self,
        session_factory: Callable = None,
        pipeline: SignalIntelligencePipeline = None,
    ):
        self.session_factory = session_factory or get_session
        self.pipeline = pipeline or SignalIntelligencePipeline(session_factory=self.session_factory)

    async def analyze_signals(self) -> AnalysisResult:
        """Run the full analysis pipeline."""
        thresholds = None
        if settings.USE_ADAPTIVE_THRESHOLDS:
            thresholds = await self.get_thresholds()
        return await self.pipeline.run(thresholds=thresholds)

    async def push_to_alerts(self, signal: Signal) -> None:
        """Insert one alert summarizing a signal."""
        async with self.session_factory() as session:
            await AlertEmitter(session).push(signal)

    async def update_thresholds(self, current_drift: float) -> ThresholdConfig:
        """Adapt and persist thresholds for an explicit drift value."""
        async with self.session_factory() as session:
            return await ThresholdAdapter(session).update(current_drift)

    async def get_thresholds(self) -> ThresholdConfig:
        """Currently active thresholds."""
        async with self.session_factory() as session:
            return await ThresholdAdapter(session).current()

    async def get_latest_analysis(self) -> Optional[AnalysisResult]:
        """Cached snapshot of the last run, if any."""
        return await self.pipeline.latest()

    async def run_cycle(self) -> AnalysisResult:
        """
        Scheduled tick.

        Steps:
        1. Analyze signals
        2. Push the first AUTO_ALERT_TOP_N top signals with high/critical urgency
        3. Adapt thresholds when |drift| exceeds THRESHOLD_DRIFT_TRIGGER

        Alert failures are logged per signal and do not fail the cycle.
        """
        result = await self.analyze_signals()

        if settings.AUTO_ALERT_ENABLED:
            pushed = 0
            for signal in result.top_signals[:settings.AUTO_ALERT_TOP_N]:
                if signal.urgency_level not in ALERTABLE_URGENCY:
                    continue
                try:
                    await self.push_to_alerts(signal)
                    pushed += 1
                except Exception as e:
                    logger.error(f"Failed to push signal {signal.id} to alerts: {e}")
            logger.info(f"Pushed {pushed} high-priority signals to alerts")

        drift = result.intelligence_metrics.current_sentiment_drift
        if abs(drift) > settings.THRESHOLD_DRIFT_TRIGGER:
            await self.update_thresholds(drift)

        return result
