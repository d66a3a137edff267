"""Generic CRUD repository and helpers for the named finder methods."""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from sqlalchemy import ColumnElement, func
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select
from sqlmodel.sql.expression import SelectOfScalar

from orm_relationships.core.errors import DataIntegrityViolationError

EntityT = TypeVar("EntityT", bound=SQLModel)


def like_ignoring_case(column: Any, pattern: str) -> ColumnElement[bool]:
    """``lower(column) LIKE lower(pattern)``; the caller supplies the ``%`` wildcards."""
    return func.lower(column).like(pattern.lower())


def equals_ignoring_case(column: Any, value: str) -> ColumnElement[bool]:
    """``lower(column) = lower(value)``."""
    return func.lower(column) == value.lower()


class CrudRepository(Generic[EntityT]):
    """Data-access layer with the standard CRUD operations for one entity class.

    Every mutating operation commits the session. When the database rejects
    the write the session is rolled back and ``DataIntegrityViolationError``
    is raised.
    """

    model: ClassVar[type[Any]]

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def find_all(self) -> list[EntityT]:
        statement = select(self.model).order_by(self.model.id)
        return self._find_many(statement)

    def find_by_id(self, entity_id: int) -> EntityT | None:
        return self._session.get(self.model, entity_id)

    def exists_by_id(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None

    def count(self) -> int:
        statement = select(func.count()).select_from(self.model)
        return self._session.exec(statement).one()

    def save(self, entity: EntityT) -> EntityT:
        """Persist ``entity`` and return the managed instance.

        A new entity (no identifier) is inserted. An entity carrying an
        identifier but not attached to this session is merged: the stored row
        is updated with its values and the session's own instance is returned.
        """
        state = sa_inspect(entity)
        with self._transaction("save"):
            if state.transient and entity.id is None:
                self._session.add(entity)
                managed = entity
            elif state.transient or state.detached:
                managed = self._session.merge(entity)
            else:
                managed = entity
        logger.debug("Saved {} id={}", self.entity_name, managed.id)
        return managed

    def save_all(self, entities: Iterable[EntityT]) -> list[EntityT]:
        return [self.save(entity) for entity in entities]

    def delete(self, entity: EntityT) -> None:
        """Delete a stored entity.

        An entity that was never saved has no row to delete and is ignored.
        A detached or copied entity is deleted by its identifier.
        """
        if entity.id is None:
            logger.debug("Ignoring delete of unsaved {}", self.entity_name)
            return

        with self._transaction("delete"):
            if sa_inspect(entity).persistent:
                target = entity
            else:
                target = self._session.get(self.model, entity.id)
            if target is not None:
                self._session.delete(target)
        logger.debug("Deleted {} id={}", self.entity_name, entity.id)

    def delete_by_id(self, entity_id: int) -> None:
        with self._transaction("delete"):
            target = self._session.get(self.model, entity_id)
            if target is not None:
                self._session.delete(target)

    def delete_all(self) -> None:
        with self._transaction("delete"):
            for entity in self.find_all():
                self._session.delete(entity)

    def _find_one(self, statement: SelectOfScalar[Any]) -> EntityT | None:
        return self._session.exec(statement).first()

    def _find_many(self, statement: SelectOfScalar[Any]) -> list[EntityT]:
        return list(self._session.exec(statement).all())

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[None]:
        """Commit the work done in the block, translating integrity failures."""
        try:
            yield
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            logger.error(
                "Could not {} {}: {}", operation, self.entity_name, e.orig
            )
            raise DataIntegrityViolationError(
                operation, self.entity_name, str(e.orig)
            ) from e
