"""
Intelligence Config Repository

Key/value store for adaptive thresholds and cached analysis results.
"""
from typing import Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from database.models import IntelligenceConfig
from .base import BaseRepository


_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


class IntelligenceConfigRepository(BaseRepository[IntelligenceConfig]):
    """Repository for config entries, keyed by config_key."""

    model = IntelligenceConfig

    async def get_value(self, config_key: str) -> Optional[dict]:
        """Get the stored value for a key, or None."""
        entry = await self.get(config_key)
        if not entry:
            return None
        return entry.config_value

    async def upsert(
        self,
        config_key: str,
        config_value: dict,
        config_type: str = "system",
        description: str = None,
    ) -> IntelligenceConfig:
        """
        Insert or overwrite the entry for a key in one statement.

        Concurrent writers to the same key both succeed; the last one wins.
        """
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Config upsert not supported for dialect '{dialect}'")

        now = self.now()
        stmt = insert(IntelligenceConfig).values(
            config_key=config_key,
            config_type=config_type,
            config_value=config_value,
            description=description,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[IntelligenceConfig.config_key],
            set_={
                "config_type": stmt.excluded.config_type,
                "config_value": stmt.excluded.config_value,
                "description": stmt.excluded.description,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)

        return await self.session.get(IntelligenceConfig, config_key, populate_existing=True)
