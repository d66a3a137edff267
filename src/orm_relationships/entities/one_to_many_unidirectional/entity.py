"""Entities: one-to-many, unidirectional with a join column.

``email.user_id`` references ``user.id`` but only ``User.emails`` maps it.
Deleting a user deletes its emails, both through the ORM cascade and the
``ON DELETE CASCADE`` of the foreign key.
"""

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity, add_unique


class OneToManyUnidirectionalBase(IdentityEntity, registry=registry()):
    pass


class Email(OneToManyUnidirectionalBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)
    user_id: int | None = Field(default=None, foreign_key="user.id")


class User(OneToManyUnidirectionalBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)

    emails: list[Email] = Relationship(
        sa_relationship_kwargs={"cascade": "all, delete", "lazy": "selectin"}
    )

    def add_email(self, email: Email) -> bool:
        return add_unique(self.emails, email)

    def remove_email(self, email: Email) -> bool:
        if email not in self.emails:
            return False
        self.emails.remove(email)
        return True
