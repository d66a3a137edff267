"""Example 003: one-to-one, bidirectional (User <-> Email, User owns)."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, OneToOneBidirectionalBase, User
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=3,
    slug="one_to_one_bidirectional",
    title="One-to-one, bidirectional",
    mapping="user.email_id -> email.id; User.email <-> Email.user",
    owner="User",
    base=OneToOneBidirectionalBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "OneToOneBidirectionalBase",
    "User",
    "UserRepository",
]
