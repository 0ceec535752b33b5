"""
Base Repository Pattern with SQLAlchemy

Provides common async CRUD operations for all repositories.
"""
from datetime import datetime
from typing import TypeVar, Generic, Optional, Sequence, Type, Any
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.base import Base


# Generic type for model classes
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Base repository with common async database operations.

    Subclasses should set the `model` class attribute to their specific
    SQLAlchemy model class.

    Example:
        class SentimentLogRepository(BaseRepository[SentimentLog]):
            model = SentimentLog
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    # ============================================
    # READ OPERATIONS
    # ============================================

    async def get(self, entity_id: Any) -> Optional[ModelT]:
        """
        Get entity by primary key.

        Args:
            entity_id: Primary key value

        Returns:
            Entity or None if not found
        """
        return await self.session.get(self.model, entity_id)

    async def get_all(
        self,
        limit: int = 100,
        offset: int = 0,
        order_by: str = "created_at",
        descending: bool = True
    ) -> Sequence[ModelT]:
        """
        Get all entities with pagination.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
            order_by: Column name to sort by
            descending: Sort in descending order

        Returns:
            List of entities
        """
        column = getattr(self.model, order_by)
        if descending:
            column = column.desc()

        stmt = select(self.model).order_by(column).limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    # ============================================
    # WRITE OPERATIONS
    # ============================================

    async def add(self, entity: ModelT) -> ModelT:
        """
        Add a new entity.

        Args:
            entity: Entity to add

        Returns:
            Added entity with any auto-generated values
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    # ============================================
    # UTILITY METHODS
    # ============================================

    @staticmethod
    def generate_id(prefix: str = "") -> str:
        """
        Generate unique ID with optional prefix.

        Args:
            prefix: Optional prefix for the ID

        Returns:
            Unique ID string
        """
        unique_part = uuid.uuid4().hex[:12]
        timestamp = datetime.now().strftime('%Y%m%d%H%M%S')
        base_id = f"{timestamp}_{unique_part}"
        return f"{prefix}_{base_id}" if prefix else base_id

    @staticmethod
    def now() -> datetime:
        """Get current datetime."""
        return datetime.now()
