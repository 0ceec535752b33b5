"""
Database Initialization

Applies Alembic migrations for the intelligence tables.
"""
from loguru import logger

from config import settings


def _alembic_config():
    from alembic.config import Config

    alembic_cfg = Config(str(settings.BASE_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(settings.BASE_DIR / "migrations"))
    return alembic_cfg


def run_migrations() -> None:
    """
    Run pending Alembic migrations.

    This is a convenience wrapper around Alembic upgrade command.
    """
    from alembic import command

    command.upgrade(_alembic_config(), "head")
    logger.info("Database migrations completed")
