"""Example 005: one-to-many, bidirectional with a join column on email."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, OneToManyBidirectionalBase, User
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=5,
    slug="one_to_many_bidirectional",
    title="One-to-many, bidirectional",
    mapping="email.user_id -> user.id; Email.user <-> User.emails",
    owner="Email",
    base=OneToManyBidirectionalBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "OneToManyBidirectionalBase",
    "User",
    "UserRepository",
]
