"""
Priority Scorer

Scores each signal against the current sentiment baseline with a
weighted multi-factor formula:

    priority = 0.4 * urgency_weight
             + 0.3 * change_from_baseline
             + 0.2 * topic_relevance
             + 0.1 * emotion_intensity
"""
from typing import Iterable, List

from loguru import logger

from constants import PRIORITY_KEYWORDS, HIGH_INTENSITY_EMOTIONS
from ..models import Signal
from .models import PriorityResult
from .config import (
    WEIGHT_URGENCY,
    WEIGHT_CHANGE,
    WEIGHT_RELEVANCE,
    WEIGHT_EMOTION,
    THREAT_LEVEL_WEIGHTS,
    UNKNOWN_THREAT_WEIGHT,
    SENTIMENT_MAGNITUDE_TRIGGER,
    SENTIMENT_MAGNITUDE_BOOST,
    BASE_RELEVANCE,
    KEYWORD_RELEVANCE_BOOST,
    INFLUENCE_TRIGGER,
    INFLUENCE_RELEVANCE_BOOST,
    BASE_EMOTION_INTENSITY,
    HIGH_INTENSITY_SCORE,
    MIXED_EMOTION_SCORE,
    MIXED_EMOTION_MIN_TAGS,
    SPIKE_CHANGE_THRESHOLD,
    urgency_level_for,
)


class PriorityScorer:
    """
    Multi-factor priority scorer.

    Pure and stateless apart from its vocabularies. Scoring weights are
    fixed; adaptive thresholds are not consulted here.
    """

    def __init__(
        self,
        priority_keywords: Iterable[str] = None,
        high_intensity_emotions: Iterable[str] = None,
    ):
        """
        Initialize scorer.

        Args:
            priority_keywords: Keywords that raise topic relevance
                (defaults to the political, security and economic sets)
            high_intensity_emotions: Emotion tags that mark high intensity
        """
        keywords = PRIORITY_KEYWORDS if priority_keywords is None else priority_keywords
        emotions = HIGH_INTENSITY_EMOTIONS if high_intensity_emotions is None else high_intensity_emotions
        self.priority_keywords = frozenset(k.lower() for k in keywords)
        self.high_intensity_emotions = frozenset(e.lower() for e in emotions)

    def score(self, signal: Signal, baseline: float) -> PriorityResult:
        """
        Score a single signal.

        Args:
            signal: Signal to score
            baseline: Trailing-window mean sentiment

        Returns:
            PriorityResult with the composite score, urgency tier and sub-metrics
        """
        sentiment = signal.sentiment_score or 0.0
        change_from_baseline = abs(sentiment - baseline)

        urgency_weight = self.urgency_weight(signal.threat_level, sentiment)
        topic_relevance = self.topic_relevance(signal.keywords_detected, signal.author_influence_score)
        emotion_intensity = self.emotion_intensity(signal.emotional_tone)

        priority_score = (
            WEIGHT_URGENCY * urgency_weight
            + WEIGHT_CHANGE * change_from_baseline
            + WEIGHT_RELEVANCE * topic_relevance
            + WEIGHT_EMOTION * emotion_intensity
        )
        priority_score = max(0.0, min(1.0, priority_score))

        return PriorityResult(
            priority_score=priority_score,
            urgency_level=urgency_level_for(priority_score),
            change_from_baseline=change_from_baseline,
            topic_relevance=topic_relevance,
            urgency_weight=urgency_weight,
            emotion_intensity=emotion_intensity,
        )

    def score_batch(self, signals: List[Signal], baseline: float) -> List[Signal]:
        """
        Score signals and return annotated copies in the same order.

        Each copy carries the derived fields plus spike_indicator.
        """
        scored = []
        for signal in signals:
            result = self.score(signal, baseline)
            scored.append(signal.with_scoring(
                **result.to_dict(),
                spike_indicator=result.change_from_baseline > SPIKE_CHANGE_THRESHOLD,
            ))

        if scored:
            avg_score = sum(s.priority_score for s in scored) / len(scored)
            spikes = sum(1 for s in scored if s.spike_indicator)
            logger.info(f"Scoring complete: {len(scored)} signals, avg={avg_score:.3f}, spikes={spikes}")

        return scored

    # ============================================
    # FACTORS
    # ============================================

    @staticmethod
    def urgency_weight(threat_level: str, sentiment: float) -> float:
        weight = THREAT_LEVEL_WEIGHTS.get(threat_level, UNKNOWN_THREAT_WEIGHT)
        if abs(sentiment) > SENTIMENT_MAGNITUDE_TRIGGER:
            weight = min(1.0, weight + SENTIMENT_MAGNITUDE_BOOST)
        return weight

    def topic_relevance(self, keywords: List[str], influence: float) -> float:
        relevance = BASE_RELEVANCE
        if keywords and any(k.lower() in self.priority_keywords for k in keywords):
            relevance = min(1.0, relevance + KEYWORD_RELEVANCE_BOOST)
        if influence is not None and influence > INFLUENCE_TRIGGER:
            relevance = min(1.0, relevance + INFLUENCE_RELEVANCE_BOOST)
        return relevance

    def emotion_intensity(self, tones: List[str]) -> float:
        if not tones:
            return BASE_EMOTION_INTENSITY
        distinct = {t.lower() for t in tones}
        if distinct & self.high_intensity_emotions:
            return HIGH_INTENSITY_SCORE
        if len(distinct) >= MIXED_EMOTION_MIN_TAGS:
            return MIXED_EMOTION_SCORE
        return BASE_EMOTION_INTENSITY
