"""Entities: one-to-many, bidirectional with a join column.

``Email.user`` owns ``email.user_id``; ``User.emails`` is its inverse. The
foreign key has no delete action, so a user still referenced by emails
cannot be deleted.
"""

from typing import Optional

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity


class OneToManyBidirectionalBase(IdentityEntity, registry=registry()):
    pass


class User(OneToManyBidirectionalBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)

    emails: list["Email"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"passive_deletes": "all", "lazy": "selectin"},
    )

    def add_email(self, email: "Email") -> bool:
        """Attach ``email`` to this user, keeping both sides in step."""
        if email in self.emails:
            return False
        email.user = self
        return True


class Email(OneToManyBidirectionalBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)
    user_id: int | None = Field(default=None, foreign_key="user.id")

    user: Optional[User] = Relationship(
        back_populates="emails", sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_user(self, user: User) -> None:
        """Point this email at ``user``; the user's ``emails`` follows."""
        self.user = user
