"""Example 008: one-to-many, bidirectional through the user_emails link table."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, OneToManyBidirectionalLinkTableBase, User, UserEmails
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=8,
    slug="one_to_many_bidirectional_link_table",
    title="One-to-many, bidirectional, link table",
    mapping="user_emails(user_id, emails_id unique); User.emails <-> Email.user",
    owner="User",
    base=OneToManyBidirectionalLinkTableBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "OneToManyBidirectionalLinkTableBase",
    "User",
    "UserEmails",
    "UserRepository",
]
