"""
Weights and breakpoints for priority scoring.

Contains:
- Component weights of the composite priority score
- Threat level lookup and sentiment-magnitude boost
- Topic relevance and emotion intensity factors
- Urgency tier breakpoints and the step function over them
"""
from constants import ThreatLevel, UrgencyLevel


# ============================================
# COMPOSITE WEIGHTS
# ============================================

WEIGHT_URGENCY = 0.4
WEIGHT_CHANGE = 0.3
WEIGHT_RELEVANCE = 0.2
WEIGHT_EMOTION = 0.1


# ============================================
# URGENCY WEIGHT
# ============================================

THREAT_LEVEL_WEIGHTS = {
    ThreatLevel.CRITICAL.value: 1.0,
    ThreatLevel.HIGH.value: 0.8,
    ThreatLevel.MEDIUM.value: 0.6,
    ThreatLevel.LOW.value: 0.4,
}
UNKNOWN_THREAT_WEIGHT = 0.2

SENTIMENT_MAGNITUDE_TRIGGER = 0.7   # |sentiment_score| above this boosts urgency
SENTIMENT_MAGNITUDE_BOOST = 0.2


# ============================================
# TOPIC RELEVANCE
# ============================================

BASE_RELEVANCE = 0.5
KEYWORD_RELEVANCE_BOOST = 0.4
INFLUENCE_TRIGGER = 0.7             # author_influence_score above this boosts relevance
INFLUENCE_RELEVANCE_BOOST = 0.2


# ============================================
# EMOTION INTENSITY
# ============================================

BASE_EMOTION_INTENSITY = 0.5
HIGH_INTENSITY_SCORE = 0.8
MIXED_EMOTION_SCORE = 0.7
MIXED_EMOTION_MIN_TAGS = 3          # more than two distinct tags


# ============================================
# URGENCY TIERS
# ============================================

URGENCY_BREAKPOINTS = (
    (0.8, UrgencyLevel.CRITICAL),
    (0.6, UrgencyLevel.HIGH),
    (0.4, UrgencyLevel.MEDIUM),
)

SPIKE_CHANGE_THRESHOLD = 0.5        # change_from_baseline above this flags a spike


def urgency_level_for(priority_score: float) -> str:
    """
    Map a priority score to its urgency tier.

    Args:
        priority_score: Composite score in [0, 1]

    Returns:
        'critical', 'high', 'medium' or 'low'
    """
    for breakpoint, level in URGENCY_BREAKPOINTS:
        if priority_score >= breakpoint:
            return level.value
    return UrgencyLevel.LOW.value
