"""
Data models for the Detector module.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class PatternShift:
    """A detected deviation from baseline in one pattern family."""
    id: str
    pattern_type: str  # 'sentiment_spike', 'emotion_surge', 'topic_emergence', 'regional_anomaly'
    baseline_value: float
    current_value: float
    change_magnitude: float
    confidence: float
    detected_at: datetime
    region: Optional[str] = None
    emotion: Optional[str] = None
    topic: Optional[str] = None

    @staticmethod
    def make_id(pattern_type: str, label: str, at: datetime) -> str:
        """Synthetic id: '{pattern_type}_{label}_{epoch_ms}'."""
        return f"{pattern_type}_{label}_{int(at.timestamp() * 1000)}"

    @classmethod
    def from_dict(cls, data: dict) -> "PatternShift":
        detected_at = data.get("detected_at")
        if isinstance(detected_at, str):
            detected_at = datetime.fromisoformat(detected_at)
        return cls(
            id=data["id"],
            pattern_type=data["pattern_type"],
            baseline_value=data["baseline_value"],
            current_value=data["current_value"],
            change_magnitude=data["change_magnitude"],
            confidence=data["confidence"],
            detected_at=detected_at,
            region=data.get("region"),
            emotion=data.get("emotion"),
            topic=data.get("topic"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pattern_type": self.pattern_type,
            "region": self.region,
            "emotion": self.emotion,
            "topic": self.topic,
            "baseline_value": self.baseline_value,
            "current_value": self.current_value,
            "change_magnitude": self.change_magnitude,
            "confidence": self.confidence,
            "detected_at": self.detected_at.isoformat() if self.detected_at else None,
        }
