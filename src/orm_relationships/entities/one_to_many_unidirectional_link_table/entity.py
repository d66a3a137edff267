"""Entities: one-to-many, unidirectional through a link table.

``user_emails`` pairs a user with its emails. ``emails_id`` is unique, so an
email belongs to at most one user. Deleting a user removes its link rows and
keeps the emails.
"""

from sqlalchemy.orm import registry
from sqlmodel import Field, Relationship

from orm_relationships.entities._base import IdentityEntity, add_unique


class OneToManyUnidirectionalLinkTableBase(IdentityEntity, registry=registry()):
    pass


class UserEmails(OneToManyUnidirectionalLinkTableBase, table=True):
    __tablename__ = "user_emails"

    user_id: int | None = Field(default=None, foreign_key="user.id", primary_key=True)
    emails_id: int | None = Field(
        default=None, foreign_key="email.id", primary_key=True, unique=True
    )


class Email(OneToManyUnidirectionalLinkTableBase, table=True):
    __tablename__ = "email"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=50)


class User(OneToManyUnidirectionalLinkTableBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)

    emails: list[Email] = Relationship(
        link_model=UserEmails, sa_relationship_kwargs={"lazy": "selectin"}
    )

    def add_email(self, email: Email) -> bool:
        return add_unique(self.emails, email)
