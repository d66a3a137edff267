from sqlmodel import select

from orm_relationships.core.repository import (
    CrudRepository,
    equals_ignoring_case,
    like_ignoring_case,
)

from .entity import Email, User


class UserRepository(CrudRepository[User]):
    """Data-access layer for users and, through the cascade, their emails."""

    model = User

    def find_by_username(self, username: str) -> User | None:
        return self._find_one(select(User).where(User.username == username))

    def find_by_emails_email_like_ignoring_case(self, email_like: str) -> list[User]:
        statement = (
            select(User)
            .join(User.emails)
            .where(like_ignoring_case(Email.email, email_like))
            .distinct()
            .order_by(User.id)
        )
        return self._find_many(statement)


class EmailRepository(CrudRepository[Email]):
    """Data-access layer for emails."""

    model = Email

    def find_by_email_ignoring_case(self, email: str) -> Email | None:
        statement = select(Email).where(equals_ignoring_case(Email.email, email))
        return self._find_one(statement)
