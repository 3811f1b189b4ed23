"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, List, Type, Any
from sqlalchemy import inspect, select
from sqlalchemy.orm import Session, make_transient_to_detached
from sqlalchemy.orm.attributes import flag_modified
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model
        self._pk = inspect(model).primary_key[0]

    def get_by_id(self, entity_id: Any) -> Optional[ModelType]:
        """
        Get entity by primary key.

        Args:
            entity_id: Primary key value

        Returns:
            Entity or None if not found
        """
        return self.db.get(self.model, entity_id)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        """Get all entities ordered by primary key"""
        stmt = select(self.model).order_by(self._pk).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.scalars(stmt))

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def replace(self, entity: ModelType) -> None:
        """
        Overwrite every column of an existing row with the values on ``entity``.

        ``entity`` is a fresh, unsaved instance carrying the primary key of the
        row to replace. It is attached as if it had been loaded, every non-key
        column is flagged as modified, and the session is committed, so a
        single UPDATE keyed by primary key is emitted without a prior SELECT.

        Raises:
            sqlalchemy.orm.exc.StaleDataError: the UPDATE matched no row
                (the row was deleted before the commit).
        """
        mapper = inspect(self.model)
        pk_keys = {mapper.get_property_by_column(c).key for c in mapper.primary_key}
        columns = [attr.key for attr in mapper.column_attrs if attr.key not in pk_keys]

        # Unset attributes would be expired on attach; replace means "set to NULL"
        for key in columns:
            if key not in entity.__dict__:
                setattr(entity, key, None)

        make_transient_to_detached(entity)
        stale = self.db.identity_map.get(inspect(entity).key)
        if stale is not None:
            self.db.expunge(stale)
        self.db.add(entity)
        for key in columns:
            flag_modified(entity, key)
        self.db.commit()

    def delete(self, entity_id: Any) -> bool:
        """Delete entity by ID"""
        entity = self.get_by_id(entity_id)
        if entity:
            self.db.delete(entity)
            self.db.commit()
            return True
        return False

    def exists(self, entity_id: Any) -> bool:
        """Check if entity exists without going through the identity map"""
        stmt = select(self._pk).where(self._pk == entity_id).limit(1)
        return self.db.execute(stmt).first() is not None
