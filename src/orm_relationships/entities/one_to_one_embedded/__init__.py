"""Example 001: one-to-one, email embedded in the user row.

- Email: value object without table or identifier
- User: table ``user`` holding the address in column ``email``
- UserRepository: data access for users
"""

from pathlib import Path

from orm_relationships.entities._base import ExampleDefinition

from .entity import Email, EmbeddedBase, User
from .repository import UserRepository

EXAMPLE = ExampleDefinition(
    number=1,
    slug="one_to_one_embedded",
    title="One-to-one, embedded",
    mapping="Email value object stored in user.email",
    owner="User",
    base=EmbeddedBase,
    user_repository=UserRepository,
    email_repository=None,
    package_dir=Path(__file__).parent,
)

__all__ = ["EXAMPLE", "Email", "EmbeddedBase", "User", "UserRepository"]
