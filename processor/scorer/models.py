"""
Data models for the Scorer module.
"""
from dataclasses import dataclass


@dataclass
class PriorityResult:
    """Result of scoring a single signal."""
    priority_score: float
    urgency_level: str
    change_from_baseline: float
    topic_relevance: float
    urgency_weight: float = 0.0
    emotion_intensity: float = 0.0

    def to_dict(self) -> dict:
        """Derived fields carried onto the scored signal."""
        return {
            "priority_score": self.priority_score,
            "urgency_level": self.urgency_level,
            "change_from_baseline": self.change_from_baseline,
            "topic_relevance": self.topic_relevance,
        }
