"""Integration tests for the many-to-many mapping with two independent link tables."""

import pytest
from sqlalchemy import func
from sqlmodel import select

from orm_relationships.core.errors import DataIntegrityViolationError
from orm_relationships.entities.many_to_many_bidirectional_link_tables_without_owner import (
    EXAMPLE,
    Email,
    EmailRepository,
    EmailUsers,
    User,
    UserEmails,
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


def link_counts(session) -> tuple[int, int]:
    """Rows in user_emails and in email_users."""
    return (
        session.exec(select(func.count()).select_from(UserEmails)).one(),
        session.exec(select(func.count()).select_from(EmailUsers)).one(),
    )


def test_both_sides_read_their_own_table(users, emails, load_fixture):
    load_fixture(EXAMPLE, "create-several-emails-with-users")

    assert len(users.find_by_username("user3").emails) == 4
    common = emails.find_by_email_ignoring_case("common@example.com")
    assert sorted(user.username for user in common.users) == ["user2", "user3"]


def test_user_side_writes_only_user_emails(users, session):
    user = User(username="user1", password="pass1")
    user.add_email(Email(email="user1@example.com"))

    users.save(user)

    assert link_counts(session) == (1, 0)


def test_email_side_writes_only_email_users(users, emails, session):
    user = users.save(User(username="user1", password="pass1"))
    email = Email(email="user1@example.com")
    email.add_user(user)

    emails.save(email)

    assert link_counts(session) == (0, 1)
    assert users.find_by_username("user1").emails == []


def test_delete_user_linked_from_emails_is_rejected(users, session, load_fixture):
    load_fixture(EXAMPLE, "create-several-emails-with-users")

    with pytest.raises(DataIntegrityViolationError):
        users.delete(users.find_by_username("user1"))

    assert users.count() == 3
    assert link_counts(session) == (8, 8)


def test_delete_user_linked_only_from_its_side(users, emails, session):
    user = User(username="user1", password="pass1")
    user.add_email(Email(email="user11@example.com"))
    user.add_email(Email(email="user12@example.com"))
    users.save(user)

    users.delete(user)

    assert users.count() == 0
    assert emails.count() == 2
    assert link_counts(session) == (0, 0)


def test_delete_email_linked_from_users_is_rejected(emails, load_fixture):
    load_fixture(EXAMPLE, "create-several-emails-with-users")

    with pytest.raises(DataIntegrityViolationError):
        emails.delete(emails.find_by_email_ignoring_case("user1@example.com"))

    assert emails.count() == 7


def test_derived_queries(users, emails, load_fixture):
    load_fixture(EXAMPLE, "create-several-emails-with-users")

    assert [user.username for user in users.find_by_emails_email_like_ignoring_case("%2_@%")] == [
        "user2"
    ]
    assert len(emails.find_by_users_username_like_ignoring_case("%USER%")) == 7
