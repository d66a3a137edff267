"""Example 011: many-to-many, bidirectional, the user owns user_emails."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, ManyToManyWithOwnerBase, User, UserEmails
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=11,
    slug="many_to_many_bidirectional_link_table_with_owner",
    title="Many-to-many, bidirectional, link table with owner",
    mapping="user_emails(user_id, emails_id); User.emails writes, Email.users reads",
    owner="User",
    base=ManyToManyWithOwnerBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "ManyToManyWithOwnerBase",
    "User",
    "UserEmails",
    "UserRepository",
]
