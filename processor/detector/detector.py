"""
Pattern Shift Detector

Compares the last hour against the preceding 23 hours, independently for
three pattern families:
- Regional sentiment spikes
- Emotion frequency surges
- Emerging topics

A failure in one family is logged and skipped; the others still run.
"""
from datetime import datetime
from typing import Callable, List

from loguru import logger

from constants import PatternType
from database.session import get_session
from repositories import SentimentLogRepository, TrendingTopicRepository
from .aggregation import group_by, summarize, count_tags
from .models import PatternShift
from .config import (
    RECENT_WINDOW,
    BASELINE_WINDOW,
    SPIKE_MIN_RECENT_SAMPLES,
    SPIKE_MIN_DELTA,
    SPIKE_CONFIDENCE_CAP,
    SPIKE_CONFIDENCE_SCALE,
    SURGE_MIN_FREQUENCY,
    SURGE_MIN_RATIO,
    SURGE_BASELINE_FLOOR,
    SURGE_CONFIDENCE_CAP,
    SURGE_CONFIDENCE_SCALE,
    TOPIC_LIMIT,
    TOPIC_MIN_VOLUME,
    TOPIC_CONFIDENCE_CAP,
    TOPIC_CONFIDENCE_DIVISOR,
)


class PatternShiftDetector:
    """
    Detects significant shifts relative to the trailing baseline.

    Each family opens its own session so a failed query cannot poison
    the others.
    """

    def __init__(self, session_factory: Callable = None):
        """
        Initialize detector.

        Args:
            session_factory: Async context manager factory yielding a session
                (defaults to database.session.get_session)
        """
        self.session_factory = session_factory or get_session

    async def detect(self, now: datetime = None) -> List[PatternShift]:
        """
        Run all pattern families.

        Args:
            now: Reference time for the windows (defaults to current time)

        Returns:
            All shifts computed by the families that succeeded
        """
        now = now or datetime.now()
        families = [
            ("sentiment spikes", self.detect_sentiment_spikes),
            ("emotion surges", self.detect_emotion_surges),
            ("topic emergence", self.detect_topic_emergence),
        ]

        shifts: List[PatternShift] = []
        for name, family in families:
            try:
                found = await family(now)
            except Exception as e:
                logger.exception(f"Error detecting {name}: {e}")
                continue
            logger.debug(f"Detected {len(found)} {name}")
            shifts.extend(found)

        logger.info(f"Pattern detection complete: {len(shifts)} shifts")
        return shifts

    # ============================================
    # FAMILIES
    # ============================================

    async def detect_sentiment_spikes(self, now: datetime) -> List[PatternShift]:
        """Regions whose last-hour mean sentiment moved more than 0.3 from baseline."""
        recent_start = now - RECENT_WINDOW
        baseline_start = now - BASELINE_WINDOW

        async with self.session_factory() as session:
            repo = SentimentLogRepository(session)
            recent_rows = await repo.get_regional_scores(recent_start)
            baseline_rows = await repo.get_regional_scores(baseline_start, end=recent_start)

        recent_by_region = summarize(group_by(recent_rows, key=lambda r: r[0]), value=lambda r: r[1])
        baseline_by_region = summarize(group_by(baseline_rows, key=lambda r: r[0]), value=lambda r: r[1])

        shifts = []
        for region, recent in recent_by_region.items():
            baseline = baseline_by_region.get(region)
            if baseline is None or recent.count < SPIKE_MIN_RECENT_SAMPLES:
                continue

            delta = recent.mean - baseline.mean
            if abs(delta) <= SPIKE_MIN_DELTA:
                continue

            shifts.append(PatternShift(
                id=PatternShift.make_id(PatternType.SENTIMENT_SPIKE.value, region, now),
                pattern_type=PatternType.SENTIMENT_SPIKE.value,
                region=region,
                baseline_value=baseline.mean,
                current_value=recent.mean,
                change_magnitude=delta,
                confidence=min(SPIKE_CONFIDENCE_CAP, abs(delta) * SPIKE_CONFIDENCE_SCALE),
                detected_at=now,
            ))

        return shifts

    async def detect_emotion_surges(self, now: datetime) -> List[PatternShift]:
        """Emotions whose last-hour frequency at least doubled and exceeds 10%."""
        recent_start = now - RECENT_WINDOW
        baseline_start = now - BASELINE_WINDOW

        async with self.session_factory() as session:
            repo = SentimentLogRepository(session)
            recent_tones = await repo.get_emotional_tones(recent_start)
            baseline_tones = await repo.get_emotional_tones(baseline_start, end=recent_start)

        if not recent_tones or not baseline_tones:
            return []

        recent_counts = count_tags(recent_tones, tags=lambda t: t)
        baseline_counts = count_tags(baseline_tones, tags=lambda t: t)
        total_recent = len(recent_tones)
        total_baseline = len(baseline_tones)

        shifts = []
        for emotion, count in recent_counts.items():
            recent_freq = count / total_recent
            baseline_freq = baseline_counts.get(emotion, 0) / total_baseline

            if recent_freq <= SURGE_MIN_FREQUENCY or recent_freq <= baseline_freq * SURGE_MIN_RATIO:
                continue

            shifts.append(PatternShift(
                id=PatternShift.make_id(PatternType.EMOTION_SURGE.value, emotion, now),
                pattern_type=PatternType.EMOTION_SURGE.value,
                emotion=emotion,
                baseline_value=baseline_freq,
                current_value=recent_freq,
                change_magnitude=recent_freq / max(baseline_freq, SURGE_BASELINE_FLOOR),
                confidence=min(SURGE_CONFIDENCE_CAP, recent_freq * SURGE_CONFIDENCE_SCALE),
                detected_at=now,
            ))

        return shifts

    async def detect_topic_emergence(self, now: datetime) -> List[PatternShift]:
        """Top topics first seen in the last hour with volume above 10."""
        async with self.session_factory() as session:
            repo = TrendingTopicRepository(session)
            topics = await repo.get_emerging(now - RECENT_WINDOW, limit=TOPIC_LIMIT)

        shifts = []
        for topic in topics:
            volume = topic.volume_score or 0.0
            if volume <= TOPIC_MIN_VOLUME:
                continue

            shifts.append(PatternShift(
                id=PatternShift.make_id(PatternType.TOPIC_EMERGENCE.value, topic.topic_text, now),
                pattern_type=PatternType.TOPIC_EMERGENCE.value,
                topic=topic.topic_text,
                baseline_value=0.0,
                current_value=volume,
                change_magnitude=volume,
                confidence=min(TOPIC_CONFIDENCE_CAP, volume / TOPIC_CONFIDENCE_DIVISOR),
                detected_at=topic.first_detected_at,
            ))

        return shifts
