"""Entities: many-to-many, unidirectional, owned by the user.

``user_emails`` may pair an email with several users. Only ``User.emails``
maps it: deleting a user removes its links and leaves every email in place.
"""

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity, add_unique


class ManyToManyUserOwnsBase(IdentityEntity, registry=registry()):
    pass


class UserEmails(ManyToManyUserOwnsBase, table=True):
    __tablename__ = "user_emails"

    user_id: int | None = Field(default=None, foreign_key="user.id", primary_key=True)
    emails_id: int | None = Field(default=None, foreign_key="email.id", primary_key=True)


class Email(ManyToManyUserOwnsBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)


class User(ManyToManyUserOwnsBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)

    emails: list[Email] = Relationship(
        link_model=UserEmails, sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_email(self, email: Email) -> bool:
        return add_unique(self.emails, email)
