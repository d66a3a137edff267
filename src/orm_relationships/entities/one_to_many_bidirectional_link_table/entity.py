"""Entities: one-to-many, bidirectional through a link table.

``User.emails`` owns ``user_emails`` and is the only side that writes it.
``Email.user`` reads the same table. The unique ``emails_id`` column keeps an
email to a single user, so attaching an email that already has a user fails
on save instead of moving it. Deleting either side removes its link rows.
"""

from typing import Optional

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity


class OneToManyBidirectionalLinkTableBase(IdentityEntity, registry=registry()):
    pass


class UserEmails(OneToManyBidirectionalLinkTableBase, table=True):
    __tablename__ = "user_emails"

    user_id: int | None = Field(default=None, foreign_key="user.id", primary_key=True)
    emails_id: int | None = Field(
        default=None,
        foreign_key="email.id",
        ondelete="CASCADE",
        primary_key=True,
        unique=True,
    )


class User(OneToManyBidirectionalLinkTableBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)

    emails: list["Email"] = Relationship(
        link_model=UserEmails,
        sa_relationship_kwargs={"lazy": "selectin"},
    )

    def add_email(self, email: "Email") -> bool:
        """Attach ``email`` to this user and point its ``user`` back here."""
        if email in self.emails:
            return False
        self.emails.append(email)
        email.user = self
        return True


class Email(OneToManyBidirectionalLinkTableBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)

    user: Optional[User] = Relationship(
        link_model=UserEmails,
        sa_relationship_kwargs={"uselist": False, "viewonly": True, "lazy": "selectin"},
    )
