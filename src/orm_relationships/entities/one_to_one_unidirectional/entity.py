"""Entities: one-to-one, unidirectional.

``user.email_id`` references ``email.id``. Only ``User`` knows about the
relationship; an email cannot be deleted while a user still points at it.
"""

from typing import Optional

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity


class OneToOneUnidirectionalBase(IdentityEntity, registry=registry()):
    pass


class Email(OneToOneUnidirectionalBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)


class User(OneToOneUnidirectionalBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)
    email_id: int | None = Field(default=None, foreign_key="email.id", unique=True)

    email: Optional[Email] = Relationship(sa_relationship_kwargs={"lazy": "selectin"})

    def add_email(self, email: Email) -> None:
        self.email = email
