"""Example 002: one-to-one, unidirectional (User -> Email)."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, OneToOneUnidirectionalBase, User
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=2,
    slug="one_to_one_unidirectional",
    title="One-to-one, unidirectional",
    mapping="user.email_id -> email.id; User.email only",
    owner="User",
    base=OneToOneUnidirectionalBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "OneToOneUnidirectionalBase",
    "User",
    "UserRepository",
]
