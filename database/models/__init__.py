"""
SQLAlchemy ORM Models

Models for the signal intelligence core:
- Inputs: sentiment logs and trending topics (written upstream)
- Outputs: configuration/cache entries and alerts
"""

from .base import Base, TimestampMixin
from .intelligence import SentimentLog, TrendingTopic, IntelligenceConfig, IntelligenceAlert

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Inputs
    "SentimentLog",
    "TrendingTopic",
    # Outputs
    "IntelligenceConfig",
    "IntelligenceAlert",
]
