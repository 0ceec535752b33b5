"""
Intelligence Models

Tables consumed and produced by the signal intelligence core:
- sentiment_logs: scored signals written by the upstream classifier
- trending_topics: topics tracked by the trend detector
- intelligence_config: key/value store for thresholds and cached results
- intelligence_alerts: alert records emitted for high-priority signals
"""
from datetime import datetime
from typing import Optional, List

from sqlalchemy import String, Float, Boolean, DateTime, Text, Index, JSON, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class SentimentLog(Base):
    """
    One sentiment-scored unit of observed content.

    Rows are created by the upstream classification pipeline and are
    read-only to the intelligence core. Derived priority fields are
    never written back here; they live in the cached analysis snapshot.
    """
    __tablename__ = "sentiment_logs"

    # Primary key
    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # Content
    content_text: Mapped[str] = mapped_column(Text, nullable=False)
    platform: Mapped[str] = mapped_column(String(50), nullable=False)
    author_handle: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now(), nullable=False, index=True)

    # Classification
    sentiment_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    sentiment_polarity: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # 'positive', 'negative', 'neutral'
    confidence_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    threat_level: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # 'low', 'medium', 'high', 'critical'
    region_detected: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    emotional_tone: Mapped[Optional[List[str]]] = mapped_column(JSON(none_as_null=True), nullable=True)
    keywords_detected: Mapped[Optional[List[str]]] = mapped_column(JSON(none_as_null=True), nullable=True)
    hashtags: Mapped[Optional[List[str]]] = mapped_column(JSON(none_as_null=True), nullable=True)
    language_detected: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)

    # Author / engagement
    author_influence_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    engagement_metrics: Mapped[Optional[dict]] = mapped_column(JSON(none_as_null=True), nullable=True)

    # Review
    flagged_for_review: Mapped[bool] = mapped_column(Boolean, default=False)
    processed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        Index('idx_sentiment_logs_region_created', 'region_detected', 'created_at'),
    )


class TrendingTopic(Base):
    """Topic tracked by the trend detector with its volume score."""
    __tablename__ = "trending_topics"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    topic_text: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    volume_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    sentiment_score: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    growth_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    trend_status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # 'emerging', 'trending', 'declining'
    first_detected_at: Mapped[datetime] = mapped_column(DateTime, default=func.now(), nullable=False, index=True)
    last_updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        Index('idx_trending_topics_volume', 'volume_score'),
    )


class IntelligenceConfig(Base, TimestampMixin):
    """
    Key/value configuration store.

    Holds the adaptive thresholds (config_type='system') and the latest
    analysis snapshot (config_type='cache'). Writes are upserts by key,
    so the last writer wins.
    """
    __tablename__ = "intelligence_config"

    config_key: Mapped[str] = mapped_column(String(100), primary_key=True)
    config_type: Mapped[str] = mapped_column(String(20), nullable=False, default='system')
    config_value: Mapped[dict] = mapped_column(JSON, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<IntelligenceConfig(config_key={self.config_key})>"


class IntelligenceAlert(Base):
    """Alert record. Insert-only from the intelligence core."""
    __tablename__ = "intelligence_alerts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    alert_type: Mapped[str] = mapped_column(String(50), nullable=False)
    severity: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    affected_regions: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    sentiment_data: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    related_content_ids: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    auto_generated: Mapped[bool] = mapped_column(Boolean, default=True)
    acknowledged: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now(), nullable=False, index=True)
