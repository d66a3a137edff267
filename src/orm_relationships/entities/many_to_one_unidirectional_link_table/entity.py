"""Entities: many-to-one, unidirectional through a link table.

``email_user`` gives each email at most one user: ``email_id`` is its
primary key. Only ``Email`` maps the relationship, so deleting an email
removes its link row while a linked user cannot be deleted.
"""

from typing import Optional

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity


class ManyToOneUnidirectionalLinkTableBase(IdentityEntity, registry=registry()):
    pass


class EmailUser(ManyToOneUnidirectionalLinkTableBase, table=True):
    __tablename__ = "email_user"

    email_id: int | None = Field(default=None, foreign_key="email.id", primary_key=True)
    user_id: int | None = Field(default=None, foreign_key="user.id")


class User(ManyToOneUnidirectionalLinkTableBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)


class Email(ManyToOneUnidirectionalLinkTableBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)

    user: Optional[User] = Relationship(
        link_model=EmailUser,
        sa_relationship_kwargs={"uselist": False, "lazy": "selectin"},
    )

    def add_user(self, user: User) -> None:
        self.user = user
