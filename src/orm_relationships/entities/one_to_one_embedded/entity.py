"""Entities: one-to-one with the email embedded in the user row.

``Email`` has no table and no identifier of its own. Its address lives in
the ``email`` column of ``user`` and it is compared by value.
"""

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlalchemy import Column, String
from sqlalchemy.orm import registry
from sqlmodel import Field

from orm_relationships.entities._base import IdentityEntity


class EmbeddedBase(IdentityEntity, registry=registry()):
    pass


class Email(BaseModel):
    """Email value object."""

    model_config = ConfigDict(frozen=True)

    email: str = PydanticField(max_length=50, description="Email address")

    def __str__(self) -> str:
        return self.email


class User(EmbeddedBase, table=True):
    __tablename__ = "user"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50)
    password: str = Field(max_length=50)
    email_address: str | None = Field(
        default=None, sa_column=Column("email", String(50), nullable=False)
    )

    @property
    def email(self) -> Email | None:
        if self.email_address is None:
            return None
        return Email(email=self.email_address)

    def add_email(self, email: Email) -> None:
        self.email_address = email.email
