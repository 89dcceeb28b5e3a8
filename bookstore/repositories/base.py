"""
Repository Base

A repository wraps one SQLAlchemy model behind the six store operations
the services rely on:

- find_all / find_by_id: queries, return entities or None
- is_exists: cheap existence probe used before every mutation
- create / update / delete: return True when the unit of work saved
  at least one row, False when the database refused it

Database errors inside a mutation are logged, rolled back and reported
as False. The services turn False into a persistence failure.

There is no transaction spanning is_exists and the mutation that
follows it; a concurrent request can remove the row in between.
"""

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import exists, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookstore.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Ids are Integer columns: 32-bit on PostgreSQL, 64-bit on SQLite
MAX_ID = 2**31 - 1


class Repository(Generic[ModelT]):
    """
    Generic SQLAlchemy repository.

    Subclasses set:
    - model: the mapped class
    - replace_columns: columns overwritten by update()
    - load_options: loader options applied to queries (eager loading)
    """

    model: ClassVar[type]
    replace_columns: ClassVar[tuple[str, ...]] = ()

    def __init__(self, db: Session) -> None:
        self.db = db

    def load_options(self) -> Sequence[Any]:
        return ()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def find_all(self) -> list[ModelT]:
        stmt = select(self.model).options(*self.load_options()).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def find_by_id(self, entity_id: int) -> ModelT | None:
        if not _in_range(entity_id):
            return None
        stmt = (
            select(self.model)
            .options(*self.load_options())
            .where(self.model.id == entity_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def is_exists(self, entity_id: int) -> bool:
        if not _in_range(entity_id):
            return False
        stmt = select(exists().where(self.model.id == entity_id))
        return bool(self.db.execute(stmt).scalar())

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def create(self, entity: ModelT) -> bool:
        self.db.add(entity)
        if not self._save():
            return False
        self.db.refresh(entity)
        return True

    def update(self, entity: ModelT) -> bool:
        """
        Replace every column in replace_columns with the entity's values.

        Returns False if no row has the entity's id.
        """
        values = {column: getattr(entity, column) for column in self.replace_columns}
        stmt = (
            update(self.model)
            .where(self.model.id == entity.id)
            .values(**values)
        )
        try:
            result = self.db.execute(stmt)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Update of {self.model.__name__} {entity.id} failed")
            return False

        if result.rowcount == 0:
            self.db.rollback()
            logger.warning(f"Update of {self.model.__name__} {entity.id} touched no rows")
            return False

        return self._save()

    def delete(self, entity: ModelT) -> bool:
        self.db.delete(entity)
        return self._save()

    def _save(self) -> bool:
        """Commit the unit of work; roll back and report False on failure."""
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Saving {self.model.__name__} changes failed")
            return False
        return True


def _in_range(entity_id: int) -> bool:
    """Ids the database driver can bind; anything else cannot match a row."""
    return -MAX_ID - 1 <= entity_id <= MAX_ID
