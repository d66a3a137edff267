from sqlmodel import select

from orm_relationships.core.repository import (
    CrudRepository,
    equals_ignoring_case,
    like_ignoring_case,
)

from .entity import Email, User


class UserRepository(CrudRepository[User]):
    """Data-access layer for users, whose saves write the links."""

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
    model = Email

    def find_by_email_ignoring_case(self, email: str) -> Email | None:
        statement = select(Email).where(equals_ignoring_case(Email.email, email))
        return self._find_one(statement)

    def find_by_users_username_like_ignoring_case(
        self, username_like: str
    ) -> list[Email]:
        statement = (
            select(Email)
            .join(Email.users)
            .where(like_ignoring_case(User.username, username_like))
            .distinct()
            .order_by(Email.id)
        )
        return self._find_many(statement)
