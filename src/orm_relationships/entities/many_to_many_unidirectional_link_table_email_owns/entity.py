"""Entities: many-to-many, unidirectional, owned by the email.

``email_users`` pairs emails and users and only ``Email.users`` maps it.
Deleting an email removes its links; a user still linked cannot be deleted.
"""

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity, add_unique


class ManyToManyEmailOwnsBase(IdentityEntity, registry=registry()):
    pass


class EmailUsers(ManyToManyEmailOwnsBase, table=True):
    __tablename__ = "email_users"

    email_id: int | None = Field(default=None, foreign_key="email.id", primary_key=True)
    users_id: int | None = Field(default=None, foreign_key="user.id", primary_key=True)


class User(ManyToManyEmailOwnsBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)


class Email(ManyToManyEmailOwnsBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)

    users: list[User] = Relationship(
        link_model=EmailUsers, sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_user(self, user: User) -> bool:
        return add_unique(self.users, user)
