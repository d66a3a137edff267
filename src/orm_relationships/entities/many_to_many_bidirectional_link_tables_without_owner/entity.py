"""Entities: many-to-many in both directions with two unrelated link tables.

``User.emails`` maps ``user_emails`` and ``Email.users`` maps
``email_users``. Nothing keeps the two tables in agreement: each side's
links are written by that side and removed with it.
"""

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity, add_unique


class ManyToManyWithoutOwnerBase(IdentityEntity, registry=registry()):
    pass


class UserEmails(ManyToManyWithoutOwnerBase, table=True):
    __tablename__ = "user_emails"

    user_id: int | None = Field(default=None, foreign_key="user.id", primary_key=True)
    emails_id: int | None = Field(default=None, foreign_key="email.id", primary_key=True)


class EmailUsers(ManyToManyWithoutOwnerBase, table=True):
    __tablename__ = "email_users"

    email_id: int | None = Field(default=None, foreign_key="email.id", primary_key=True)
    users_id: int | None = Field(default=None, foreign_key="user.id", primary_key=True)


class Email(ManyToManyWithoutOwnerBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)

    users: list["User"] = Relationship(
        link_model=EmailUsers, sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_user(self, user: "User") -> bool:
        return add_unique(self.users, user)


class User(ManyToManyWithoutOwnerBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)

    emails: list[Email] = Relationship(
        link_model=UserEmails, sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_email(self, email: Email) -> bool:
        return add_unique(self.emails, email)
