"""
Signal Intelligence Pipeline - orchestrator for one analysis run.

Pipeline Flow (called by the API or the scheduler):
1. Fetch signals from the last 2 hours (most recent first, max 100)
2. Compute the 7-day sentiment baseline
3. Compute current mean sentiment and drift from baseline
4. Score every signal and flag spikes
5. Select the top 10 by priority
6. Detect pattern shifts (independent of scoring)
7. Assemble run metrics
8. Store the results snapshot (overwrites the previous one)
9. Return signals, shifts and metrics

Any data-access failure in steps 1-2 or 8 aborts the run; nothing is
stored for a failed run.
"""
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from constants import ConfigKey, ConfigType
from database.session import get_session
from repositories import BaseRepository, SentimentLogRepository, IntelligenceConfigRepository
from .baseline import BaselineEstimator
from .detector import PatternShiftDetector
from .exceptions import DataAccessError
from .models import Signal, IntelligenceMetrics, ThresholdConfig, AnalysisResult
from .scorer import PriorityScorer


SNAPSHOT_DESCRIPTION = "Latest signal intelligence analysis results"


class SignalIntelligencePipeline:
    """
    Main analysis orchestrator.

    Stateless across runs: every run works on its own fetched window.
    """

    def __init__(
        self,
        session_factory: Callable = None,
        scorer: PriorityScorer = None,
        detector: PatternShiftDetector = None,
        window_hours: int = None,
        fetch_limit: int = None,
        baseline_days: int = None,
        top_n: int = None,
        high_priority_threshold: float = None,
    ):
        self.session_factory = session_factory or get_session
        self.scorer = scorer or PriorityScorer()
        self.detector = detector or PatternShiftDetector(session_factory=self.session_factory)

        self.window_hours = window_hours or settings.SIGNAL_WINDOW_HOURS
        self.fetch_limit = fetch_limit or settings.SIGNAL_FETCH_LIMIT
        self.baseline_days = baseline_days or settings.BASELINE_DAYS
        self.top_n = top_n or settings.TOP_SIGNALS_LIMIT
        self.high_priority_threshold = (
            settings.HIGH_PRIORITY_THRESHOLD if high_priority_threshold is None else high_priority_threshold
        )

    async def run(
        self,
        now: datetime = None,
        thresholds: Optional[ThresholdConfig] = None
    ) -> AnalysisResult:
        """
        Run one full analysis.

        Args:
            now: Reference time for all windows (defaults to current time)
            thresholds: Thresholds reported in the run metrics
                (defaults to ThresholdConfig defaults; scoring does not use them)

        Returns:
            AnalysisResult with top signals, pattern shifts and metrics
        """
        now = now or datetime.now()
        thresholds = thresholds or ThresholdConfig()
        run_id = BaseRepository.generate_id("analysis")

        logger.info(f"=== Starting signal intelligence analysis {run_id} ===")

        # Steps 1-2: fetch window and baseline
        try:
            async with self.session_factory() as session:
                rows = await SentimentLogRepository(session).get_recent(
                    since=now - timedelta(hours=self.window_hours),
                    limit=self.fetch_limit,
                )
                signals = [Signal.from_row(row) for row in rows]
                baseline = await BaselineEstimator(session).calculate(days=self.baseline_days, now=now)
        except SQLAlchemyError as e:
            raise DataAccessError(f"Failed to fetch signals: {e}") from e

        logger.info(f"Fetched {len(signals)} signals, baseline sentiment={baseline:.3f}")

        # Step 3: drift
        current_sentiment = self.mean_sentiment(signals)
        current_drift = current_sentiment - baseline

        # Steps 4-5: score and rank (stable sort keeps fetch order on ties)
        processed = self.scorer.score_batch(signals, baseline)
        top_signals = sorted(processed, key=lambda s: s.priority_score, reverse=True)[:self.top_n]

        # Step 6: pattern shifts
        pattern_shifts = await self.detector.detect(now=now)

        # Step 7: metrics
        metrics = IntelligenceMetrics(
            total_signals_processed=len(processed),
            high_priority_signals=sum(1 for s in processed if s.priority_score >= self.high_priority_threshold),
            pattern_shifts_detected=len(pattern_shifts),
            baseline_sentiment=baseline,
            current_sentiment_drift=current_drift,
            urgency_threshold=thresholds.urgency_threshold,
            relevance_threshold=thresholds.relevance_threshold,
        )

        result = AnalysisResult(
            top_signals=top_signals,
            pattern_shifts=pattern_shifts,
            intelligence_metrics=metrics,
            run_id=run_id,
            analyzed_at=datetime.now(),
        )

        # Step 8: snapshot
        try:
            async with self.session_factory() as session:
                await IntelligenceConfigRepository(session).upsert(
                    ConfigKey.LATEST_ANALYSIS.value,
                    result.to_snapshot(),
                    config_type=ConfigType.CACHE.value,
                    description=SNAPSHOT_DESCRIPTION,
                )
        except SQLAlchemyError as e:
            raise DataAccessError(f"Failed to store analysis results: {e}") from e

        logger.info(
            f"Analysis complete: {len(top_signals)} top signals, {len(pattern_shifts)} pattern shifts, "
            f"drift={current_drift:+.3f}"
        )
        return result

    async def latest(self) -> Optional[AnalysisResult]:
        """Read back the cached snapshot of the last successful run."""
        async with self.session_factory() as session:
            snapshot = await IntelligenceConfigRepository(session).get_value(ConfigKey.LATEST_ANALYSIS.value)
        if not snapshot:
            return None
        return AnalysisResult.from_snapshot(snapshot)

    @staticmethod
    def mean_sentiment(signals: List[Signal]) -> float:
        """Mean sentiment of a window; missing scores count as 0, empty window is 0."""
        if not signals:
            return 0.0
        return sum(s.sentiment_score or 0.0 for s in signals) / len(signals)
