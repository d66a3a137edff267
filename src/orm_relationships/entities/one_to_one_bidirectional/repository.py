from sqlmodel import select

from orm_relationships.core.repository import (
    CrudRepository,
    equals_ignoring_case,
    like_ignoring_case,
)

from .entity import Email, User


class UserRepository(CrudRepository[User]):
    """Data-access layer for users."""

    model = User

    def find_by_email_email_like_ignoring_case(self, email_like: str) -> list[User]:
        statement = (
            select(User)
            .join(User.email)
            .where(like_ignoring_case(Email.email, email_like))
        )
        return self._find_many(statement)


class EmailRepository(CrudRepository[Email]):
    """Data-access layer for emails."""

    model = Email

    def find_by_email_ignoring_case(self, email: str) -> Email | None:
        statement = select(Email).where(equals_ignoring_case(Email.email, email))
        return self._find_one(statement)

    def find_by_user_username_like_ignoring_case(self, username_like: str) -> list[Email]:
        statement = (
            select(Email)
            .join(Email.user)
            .where(like_ignoring_case(User.username, username_like))
        )
        return self._find_many(statement)
