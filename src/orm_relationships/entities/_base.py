"""Shared base entity, collection helper and the description of one example."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from sqlalchemy import MetaData
from sqlmodel import Session, SQLModel

from orm_relationships.core.errors import SqlScriptNotFoundError
from orm_relationships.core.repository import CrudRepository

SCHEMA_SCRIPT = "schema/create-schema.sql"

ItemT = TypeVar("ItemT")


class IdentityEntity(SQLModel):
    """Base for entities compared by identifier.

    Two entities of the same class are equal when they share a non-null
    identifier. An entity that has not been persisted yet is only equal to
    itself, and so is a link row, which has no identifier column.
    """

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        entity_id = getattr(self, "id", None)
        return entity_id is not None and entity_id == getattr(other, "id", None)

    def __hash__(self) -> int:
        entity_id = getattr(self, "id", None)
        if entity_id is None:
            return object.__hash__(self)
        return hash((type(self).__name__, entity_id))


def add_unique(collection: list[ItemT], item: ItemT) -> bool:
    """Append ``item`` unless an equal one is already present.

    Returns:
        True when the item was appended.
    """
    if item in collection:
        return False
    collection.append(item)
    return True


@dataclass(frozen=True)
class ExampleDefinition:
    """One numbered example: its models, repositories and SQL scripts."""

    number: int
    slug: str
    title: str
    mapping: str
    owner: str
    base: type[SQLModel]
    user_repository: type[CrudRepository]
    email_repository: type[CrudRepository] | None
    package_dir: Path

    @property
    def label(self) -> str:
        return f"{self.number:03d}-{self.slug.replace('_', '-')}"

    @property
    def metadata(self) -> MetaData:
        return self.base.metadata

    @property
    def sql_dir(self) -> Path:
        return self.package_dir / "sql"

    def script_path(self, script: str) -> Path:
        """Resolve a script name (``.sql`` optional) under the example's sql dir."""
        name = script if script.endswith(".sql") else f"{script}.sql"
        path = self.sql_dir / name
        if not path.is_file():
            raise SqlScriptNotFoundError(self.label, name)
        return path

    def fixtures(self) -> list[str]:
        """Names of the fixture scripts (schema excluded)."""
        return sorted(path.stem for path in self.sql_dir.glob("*.sql"))

    def repositories(self, session: Session) -> tuple[CrudRepository, CrudRepository | None]:
        """Instantiate the user and email repositories on ``session``."""
        email_repository = (
            self.email_repository(session) if self.email_repository else None
        )
        return self.user_repository(session), email_repository
