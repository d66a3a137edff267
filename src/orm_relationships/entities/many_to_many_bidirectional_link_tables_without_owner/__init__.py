"""Example 012: many-to-many, bidirectional, two link tables and no owner."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, EmailUsers, ManyToManyWithoutOwnerBase, User, UserEmails
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=12,
    slug="many_to_many_bidirectional_link_tables_without_owner",
    title="Many-to-many, bidirectional, two link tables without owner",
    mapping="user_emails(user_id, emails_id) for User.emails; "
    "email_users(email_id, users_id) for Email.users",
    owner="User and Email",
    base=ManyToManyWithoutOwnerBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "EmailUsers",
    "ManyToManyWithoutOwnerBase",
    "User",
    "UserEmails",
    "UserRepository",
]
