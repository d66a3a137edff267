"""Example 007: many-to-one, unidirectional through the email_user link table."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, EmailUser, ManyToOneUnidirectionalLinkTableBase, User
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=7,
    slug="many_to_one_unidirectional_link_table",
    title="Many-to-one, unidirectional, link table",
    mapping="email_user(email_id pk, user_id); Email.user only",
    owner="Email",
    base=ManyToOneUnidirectionalLinkTableBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "EmailUser",
    "ManyToOneUnidirectionalLinkTableBase",
    "User",
    "UserRepository",
]
