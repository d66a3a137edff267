"""Example 004: one-to-many, unidirectional with a join column on email."""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, OneToManyUnidirectionalBase, User
from .repository import EmailRepository, UserRepository

EXAMPLE = ExampleDefinition(
    number=4,
    slug="one_to_many_unidirectional",
    title="One-to-many, unidirectional",
    mapping="email.user_id -> user.id; User.emails only, cascading delete",
    owner="User",
    base=OneToManyUnidirectionalBase,
    user_repository=UserRepository,
    email_repository=EmailRepository,
    package_dir=Path(__file__).parent,
)

__all__ = [
    "EXAMPLE",
    "Email",
    "EmailRepository",
    "OneToManyUnidirectionalBase",
    "User",
    "UserRepository",
]
