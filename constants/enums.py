"""
Shared Enums

Application-wide enums used across the intelligence modules.
Values are the strings stored in the database and returned by the API.
"""
from enum import Enum


class ThreatLevel(str, Enum):
    """Threat level assigned to a signal by the upstream classifier."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class UrgencyLevel(str, Enum):
    """Urgency tier derived from a signal's priority score."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PatternType(str, Enum):
    """Pattern shift families."""
    SENTIMENT_SPIKE = "sentiment_spike"
    EMOTION_SURGE = "emotion_surge"
    TOPIC_EMERGENCE = "topic_emergence"
    REGIONAL_ANOMALY = "regional_anomaly"


class ConfigType(str, Enum):
    """Entry types in the intelligence_config key/value store."""
    SYSTEM = "system"
    CACHE = "cache"


class ConfigKey(str, Enum):
    """Well-known keys in the intelligence_config store."""
    THRESHOLDS = "intelligence_thresholds"
    LATEST_ANALYSIS = "latest_intelligence_analysis"


class AlertType(str, Enum):
    """Alert record types."""
    HIGH_PRIORITY_SIGNAL = "high_priority_signal"
