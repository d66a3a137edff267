"""Entities: many-to-many, bidirectional, with the user as owner.

``User.emails`` writes ``user_emails``. ``Email.users`` reads the same table
but is view-only, so links added only on the email side are never stored.
"""

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity, add_unique


class ManyToManyWithOwnerBase(IdentityEntity, registry=registry()):
    pass


class UserEmails(ManyToManyWithOwnerBase, table=True):
    __tablename__ = "user_emails"

    user_id: int | None = Field(default=None, foreign_key="user.id", primary_key=True)
    emails_id: int | None = Field(default=None, foreign_key="email.id", primary_key=True)


class Email(ManyToManyWithOwnerBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)

    users: list["User"] = Relationship(
        link_model=UserEmails,
        sa_relationship_kwargs={"viewonly": True, "lazy": "selectin"},
    )

    def add_user(self, user: "User") -> bool:
        """Record ``user`` on this side only; the link needs ``User.add_email``."""
        return add_unique(self.users, user)


class User(ManyToManyWithOwnerBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)

    emails: list[Email] = Relationship(
        link_model=UserEmails, sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_email(self, email: Email) -> bool:
        return add_unique(self.emails, email)
