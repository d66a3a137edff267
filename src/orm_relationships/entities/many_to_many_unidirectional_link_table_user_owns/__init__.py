"""Example 009: many-to-many, unidirectional, the user owns user_emails."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, ManyToManyUserOwnsBase, User, UserEmails
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=9,
    slug="many_to_many_unidirectional_link_table_user_owns",
    title="Many-to-many, unidirectional, user owns the link table",
    mapping="user_emails(user_id, emails_id); User.emails only",
    owner="User",
    base=ManyToManyUserOwnsBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "ManyToManyUserOwnsBase",
    "User",
    "UserEmails",
    "UserRepository",
]
