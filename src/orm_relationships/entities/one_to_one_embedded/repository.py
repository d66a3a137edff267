from sqlmodel import select

from orm_relationships.core.repository import CrudRepository, like_ignoring_case

from .entity import User


class UserRepository(CrudRepository[User]):
    """Data-access layer for users with an embedded email."""

    model = User

    def find_by_email_email_like_ignoring_case(self, email_like: str) -> list[User]:
        statement = select(User).where(like_ignoring_case(User.email_address, email_like))
        return self._find_many(statement)
