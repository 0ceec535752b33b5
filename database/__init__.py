"""
Database Module - Signal Intelligence Core

This module provides database access for the intelligence core.

Structure:
    database/
    ├── __init__.py      # This file - public API
    ├── session.py       # SQLAlchemy async session management
    ├── init.py          # Alembic migration runner
    └── models/          # SQLAlchemy ORM models
        ├── __init__.py
        ├── base.py
        └── intelligence.py

Usage:
    from database import get_session
    from database.models import SentimentLog

    async with get_session() as session:
        result = await session.execute(select(SentimentLog))
        rows = result.scalars().all()
"""

# SQLAlchemy Models
from .models import (
    Base,
    TimestampMixin,
    SentimentLog,
    TrendingTopic,
    IntelligenceConfig,
    IntelligenceAlert,
)

# Session Management
from .session import (
    init_engine,
    close_engine,
    create_tables,
    get_session,
)

# Migrations
from .init import run_migrations

__all__ = [
    # SQLAlchemy Models
    "Base",
    "TimestampMixin",
    "SentimentLog",
    "TrendingTopic",
    "IntelligenceConfig",
    "IntelligenceAlert",
    # Session Management
    "init_engine",
    "close_engine",
    "create_tables",
    "get_session",
    # Migrations
    "run_migrations",
]
