"""Example 006: one-to-many, unidirectional through the user_emails link table."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, OneToManyUnidirectionalLinkTableBase, User, UserEmails
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=6,
    slug="one_to_many_unidirectional_link_table",
    title="One-to-many, unidirectional, link table",
    mapping="user_emails(user_id, emails_id unique); User.emails only",
    owner="User",
    base=OneToManyUnidirectionalLinkTableBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "OneToManyUnidirectionalLinkTableBase",
    "User",
    "UserEmails",
    "UserRepository",
]
