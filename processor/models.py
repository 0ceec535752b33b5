"""
Data models for the intelligence processor.

Signals arrive as sentiment_logs rows or as JSON payloads and leave as
JSON-safe dicts (API responses and the cached snapshot).
"""
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Optional, List, Any

from .exceptions import InvalidSignalError


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as e:
        raise InvalidSignalError(f"Invalid timestamp: {value}") from e


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class Signal:
    """One sentiment-scored unit of observed content plus derived priority fields."""
    id: str
    content_text: str
    platform: str = "unknown"
    created_at: Optional[datetime] = None
    sentiment_score: Optional[float] = None
    confidence_score: Optional[float] = None
    threat_level: Optional[str] = None  # 'low', 'medium', 'high', 'critical'
    author_handle: Optional[str] = None
    region_detected: Optional[str] = None
    emotional_tone: Optional[List[str]] = None
    keywords_detected: Optional[List[str]] = None
    author_influence_score: Optional[float] = None
    engagement_metrics: Optional[Any] = None

    # Derived, computed per analysis run
    priority_score: Optional[float] = None
    urgency_level: Optional[str] = None
    change_from_baseline: Optional[float] = None
    topic_relevance: Optional[float] = None
    spike_indicator: Optional[bool] = None

    @classmethod
    def from_row(cls, row) -> "Signal":
        """Build from a SentimentLog row."""
        return cls(
            id=row.id,
            content_text=row.content_text,
            platform=row.platform,
            created_at=row.created_at,
            sentiment_score=row.sentiment_score,
            confidence_score=row.confidence_score,
            threat_level=row.threat_level,
            author_handle=row.author_handle,
            region_detected=row.region_detected,
            emotional_tone=row.emotional_tone,
            keywords_detected=row.keywords_detected,
            author_influence_score=row.author_influence_score,
            engagement_metrics=row.engagement_metrics,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Signal":
        """
        Build from a JSON payload.

        Unknown keys are ignored. Raises InvalidSignalError when the
        payload is not an object or lacks id/content_text. An empty
        content_text is accepted, as sentiment_logs allows it.
        """
        if not isinstance(data, dict):
            raise InvalidSignalError("Signal payload must be an object")
        missing = [key for key in ("id", "content_text") if data.get(key) is None]
        if missing:
            raise InvalidSignalError(f"Signal payload missing required fields: {', '.join(missing)}")

        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        values["id"] = str(values["id"])
        values["created_at"] = _parse_datetime(values.get("created_at"))
        return cls(**values)

    def with_scoring(self, **derived) -> "Signal":
        """Return a copy with derived fields set."""
        return replace(self, **derived)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content_text": self.content_text,
            "platform": self.platform,
            "author_handle": self.author_handle,
            "created_at": _isoformat(self.created_at),
            "sentiment_score": self.sentiment_score,
            "confidence_score": self.confidence_score,
            "threat_level": self.threat_level,
            "region_detected": self.region_detected,
            "emotional_tone": self.emotional_tone,
            "keywords_detected": self.keywords_detected,
            "author_influence_score": self.author_influence_score,
            "engagement_metrics": self.engagement_metrics,
            "priority_score": self.priority_score,
            "urgency_level": self.urgency_level,
            "change_from_baseline": self.change_from_baseline,
            "topic_relevance": self.topic_relevance,
            "spike_indicator": self.spike_indicator,
        }


@dataclass
class IntelligenceMetrics:
    """Run-level summary of one analysis."""
    total_signals_processed: int = 0
    high_priority_signals: int = 0
    pattern_shifts_detected: int = 0
    baseline_sentiment: float = 0.0
    current_sentiment_drift: float = 0.0
    urgency_threshold: float = 0.7
    relevance_threshold: float = 0.6

    @classmethod
    def from_dict(cls, data: dict) -> "IntelligenceMetrics":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict:
        return {
            "total_signals_processed": self.total_signals_processed,
            "high_priority_signals": self.high_priority_signals,
            "pattern_shifts_detected": self.pattern_shifts_detected,
            "baseline_sentiment": self.baseline_sentiment,
            "current_sentiment_drift": self.current_sentiment_drift,
            "urgency_threshold": self.urgency_threshold,
            "relevance_threshold": self.relevance_threshold,
        }


@dataclass
class ThresholdConfig:
    """Adaptive detection thresholds persisted under intelligence_thresholds."""
    urgency_threshold: float = 0.7
    relevance_threshold: float = 0.6
    pattern_sensitivity: float = 0.3
    last_updated: Optional[datetime] = None
    drift_factor: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ThresholdConfig":
        """Stored values override the defaults; unknown keys are ignored."""
        config = cls()
        if not data:
            return config
        for key in ("urgency_threshold", "relevance_threshold", "pattern_sensitivity", "drift_factor"):
            if data.get(key) is not None:
                setattr(config, key, float(data[key]))
        config.last_updated = _parse_datetime(data.get("last_updated"))
        return config

    def to_dict(self) -> dict:
        return {
            "urgency_threshold": self.urgency_threshold,
            "relevance_threshold": self.relevance_threshold,
            "pattern_sensitivity": self.pattern_sensitivity,
            "last_updated": _isoformat(self.last_updated),
            "drift_factor": self.drift_factor,
        }


@dataclass
class AnalysisResult:
    """Output of one orchestrated analysis run."""
    top_signals: List[Signal] = field(default_factory=list)
    pattern_shifts: list = field(default_factory=list)  # List[PatternShift]
    intelligence_metrics: IntelligenceMetrics = field(default_factory=IntelligenceMetrics)
    run_id: Optional[str] = None
    analyzed_at: Optional[datetime] = None

    def to_response(self) -> dict:
        """Payload returned to callers of analyze_signals."""
        return {
            "top_signals": [s.to_dict() for s in self.top_signals],
            "pattern_shifts": [p.to_dict() for p in self.pattern_shifts],
            "intelligence_metrics": self.intelligence_metrics.to_dict(),
        }

    def to_snapshot(self) -> dict:
        """Value stored under latest_intelligence_analysis."""
        return {
            "run_id": self.run_id,
            "top_signals": [s.to_dict() for s in self.top_signals],
            "pattern_shifts": [p.to_dict() for p in self.pattern_shifts],
            "metrics": self.intelligence_metrics.to_dict(),
            "analyzed_at": _isoformat(self.analyzed_at),
        }

    @classmethod
    def from_snapshot(cls, data: dict) -> "AnalysisResult":
        from .detector.models import PatternShift

        return cls(
            top_signals=[Signal.from_dict(s) for s in data.get("top_signals", [])],
            pattern_shifts=[PatternShift.from_dict(p) for p in data.get("pattern_shifts", [])],
            intelligence_metrics=IntelligenceMetrics.from_dict(data.get("metrics", {})),
            run_id=data.get("run_id"),
            analyzed_at=_parse_datetime(data.get("analyzed_at")),
        )
