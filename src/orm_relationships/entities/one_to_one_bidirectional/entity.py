"""Entities: one-to-one, bidirectional.

``user.email_id`` references ``email.id`` and ``Email.user`` maps the same
foreign key back. ``User`` owns the relationship. Deleting an email that a
user still references is left for the database to reject.
"""

from typing import Optional

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity


class OneToOneBidirectionalBase(IdentityEntity, registry=registry()):
    pass


class Email(OneToOneBidirectionalBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)

    user: Optional["User"] = Relationship(
        back_populates="email",
        sa_relationship_kwargs={
            "uselist": False,
            "passive_deletes": "all",
            "lazy": "selectin",
        },
    )

    def add_user(self, user: "User") -> None:
        self.user = user


class User(OneToOneBidirectionalBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)
    email_id: int | None = Field(default=None, foreign_key="email.id", unique=True)

    email: Optional[Email] = Relationship(
        back_populates="user", sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_email(self, email: Email) -> None:
        self.email = email
