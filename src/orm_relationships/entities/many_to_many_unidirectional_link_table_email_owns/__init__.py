"""Example 010: many-to-many, unidirectional, the email owns email_users."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, EmailUsers, ManyToManyEmailOwnsBase, User
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=10,
    slug="many_to_many_unidirectional_link_table_email_owns",
    title="Many-to-many, unidirectional, email owns the link table",
    mapping="email_users(email_id, users_id); Email.users only",
    owner="Email",
    base=ManyToManyEmailOwnsBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "EmailUsers",
    "ManyToManyEmailOwnsBase",
    "User",
    "UserRepository",
]
