"""Initial schema - intelligence tables

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000

Creates the tables used by the signal intelligence core.
Based on the SQLAlchemy models defined in database/models/.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ==================================================
    # SENTIMENT LOGS (written by upstream classifier)
    # ==================================================

    op.create_table(
        'sentiment_logs',
        sa.Column('id', sa.String(64), primary_key=True),
        # Content
        sa.Column('content_text', sa.Text, nullable=False),
        sa.Column('platform', sa.String(50), nullable=False),
        sa.Column('author_handle', sa.String(200), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
        # Classification
        sa.Column('sentiment_score', sa.Float, nullable=True),
        sa.Column('sentiment_polarity', sa.String(20), nullable=True),
        sa.Column('confidence_score', sa.Float, nullable=True),
        sa.Column('threat_level', sa.String(20), nullable=True),
        sa.Column('region_detected', sa.String(100), nullable=True),
        sa.Column('emotional_tone', sa.JSON, nullable=True),
        sa.Column('keywords_detected', sa.JSON, nullable=True),
        sa.Column('hashtags', sa.JSON, nullable=True),
        sa.Column('language_detected', sa.String(10), nullable=True),
        # Author / engagement
        sa.Column('author_influence_score', sa.Float, nullable=True),
        sa.Column('engagement_metrics', sa.JSON, nullable=True),
        # Review
        sa.Column('flagged_for_review', sa.Boolean, nullable=True),
        sa.Column('processed_at', sa.DateTime, nullable=True),
    )

    with op.batch_alter_table('sentiment_logs') as batch_op:
        batch_op.create_index('ix_sentiment_logs_created_at', ['created_at'])
        batch_op.create_index('ix_sentiment_logs_region_detected', ['region_detected'])
        batch_op.create_index('idx_sentiment_logs_region_created', ['region_detected', 'created_at'])

    # ==================================================
    # TRENDING TOPICS
    # ==================================================

    op.create_table(
        'trending_topics',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('topic_text', sa.String(255), nullable=False),
        sa.Column('category', sa.String(50), nullable=True),
        sa.Column('volume_score', sa.Float, nullable=True),
        sa.Column('sentiment_score', sa.Float, nullable=True),
        sa.Column('growth_rate', sa.Float, nullable=True),
        sa.Column('trend_status', sa.String(20), nullable=True),
        sa.Column('first_detected_at', sa.DateTime, nullable=False),
        sa.Column('last_updated_at', sa.DateTime, nullable=True),
    )

    with op.batch_alter_table('trending_topics') as batch_op:
        batch_op.create_index('ix_trending_topics_first_detected_at', ['first_detected_at'])
        batch_op.create_index('idx_trending_topics_volume', ['volume_score'])

    # ==================================================
    # INTELLIGENCE CONFIG (key/value store)
    # ==================================================

    op.create_table(
        'intelligence_config',
        sa.Column('config_key', sa.String(100), primary_key=True),
        sa.Column('config_type', sa.String(20), nullable=False),
        sa.Column('config_value', sa.JSON, nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )

    # ==================================================
    # INTELLIGENCE ALERTS
    # ==================================================

    op.create_table(
        'intelligence_alerts',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('alert_type', sa.String(50), nullable=False),
        sa.Column('severity', sa.String(20), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('affected_regions', sa.JSON, nullable=True),
        sa.Column('sentiment_data', sa.JSON, nullable=True),
        sa.Column('related_content_ids', sa.JSON, nullable=True),
        sa.Column('auto_generated', sa.Boolean, nullable=True),
        sa.Column('acknowledged', sa.Boolean, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False),
    )

    with op.batch_alter_table('intelligence_alerts') as batch_op:
        batch_op.create_index('ix_intelligence_alerts_severity', ['severity'])
        batch_op.create_index('ix_intelligence_alerts_created_at', ['created_at'])


def downgrade() -> None:
    op.drop_table('intelligence_alerts')
    op.drop_table('intelligence_config')
    op.drop_table('trending_topics')
    op.drop_table('sentiment_logs')
