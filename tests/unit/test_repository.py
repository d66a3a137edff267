"""Unit tests for the generic CRUD repository."""

import pytest
from sqlmodel import select

from orm_relationships.core.repository import equals_ignoring_case, like_ignoring_case
from orm_relationships.entities.many_to_many_unidirectional_link_table_user_owns import (
    EXAMPLE,
    Email,
    EmailRepository,
    User,
    UserRepository,
)


@pytest.fixture(autouse=True)
def schema(load_example):
    load_example(EXAMPLE)


@pytest.fixture
def users(session) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
def emails(session) -> EmailRepository:
    return EmailRepository(session)


class TestCrudRepository:
    def test_count_and_exists(self, users, load_fixture):
        load_fixture(EXAMPLE, "create-5-users")

        assert users.count() == 5
        assert users.exists_by_id(5) is True
        assert users.exists_by_id(6) is False

    def test_find_by_id_missing_returns_none(self, users):
        assert users.find_by_id(42) is None

    def test_find_all_is_ordered_by_id(self, users):
        users.save_all(
            [User(username=name, password="pass") for name in ("carol", "alice", "bob")]
        )

        assert [user.username for user in users.find_all()] == ["carol", "alice", "bob"]

    def test_save_all_returns_managed_entities(self, emails):
        saved = emails.save_all(
            [Email(email="a@example.com"), Email(email="b@example.com")]
        )

        assert [email.id for email in saved] == [1, 2]

    def test_save_persistent_entity_commits_changes(self, users, load_fixture):
        load_fixture(EXAMPLE, "create-1-user")
        user = users.find_by_id(1)

        user.password = "rotated"
        same = users.save(user)

        assert same is user
        users.session.expire_all()
        assert users.find_by_id(1).password == "rotated"

    def test_save_copy_of_missing_row_inserts_it(self, users):
        saved = users.save(User(id=10, username="explicit", password="pass"))

        assert saved.id == 10
        assert users.count() == 1

    def test_delete_detached_copy_by_id(self, users, load_fixture):
        load_fixture(EXAMPLE, "create-5-users")

        users.delete(User(id=3, username="whatever", password="whatever"))

        assert users.exists_by_id(3) is False
        assert users.count() == 4

    def test_delete_by_id_of_missing_row_is_a_no_op(self, users):
        users.delete_by_id(99)

        assert users.count() == 0

    def test_delete_all(self, users, emails, load_fixture):
        load_fixture(EXAMPLE, "create-several-emails-with-users")

        users.delete_all()

        assert users.count() == 0
        assert emails.count() == 7


class TestMatchers:
    def test_like_ignoring_case(self, emails, session):
        emails.save_all([Email(email="Jason@Example.com"), Email(email="other@test.org")])

        found = session.exec(
            select(Email).where(like_ignoring_case(Email.email, "%EXAMPLE%"))
        ).all()

        assert [email.email for email in found] == ["Jason@Example.com"]

    def test_equals_ignoring_case(self, emails, session):
        emails.save(Email(email="Jason@Example.com"))

        found = session.exec(
            select(Email).where(equals_ignoring_case(Email.email, "jason@example.COM"))
        ).first()

        assert found is not None
