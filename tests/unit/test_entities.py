"""Unit tests for identity-based equality and the collection helpers."""

import pytest
from pydantic import ValidationError

from orm_relationships.entities._base import add_unique
from orm_relationships.entities.many_to_many_unidirectional_link_table_user_owns import (
    Email,
    User,
    UserEmails,
)
from orm_relationships.entities.one_to_many_unidirectional import Email as OwnedEmail
from orm_relationships.entities.one_to_many_unidirectional import User as OwningUser
from orm_relationships.entities.one_to_one_embedded import Email as EmbeddedEmail
from orm_relationships.entities.one_to_one_embedded import User as EmbeddedUser
from orm_relationships.entities.one_to_one_unidirectional import Email as OtherEmail


class TestIdentityEquality:
    def test_unsaved_entities_are_only_equal_to_themselves(self):
        first = Email(email="same@example.com")
        second = Email(email="same@example.com")

        assert first == first
        assert first != second

    def test_entities_with_the_same_id_are_equal(self):
        first = Email(id=7, email="one@example.com")
        second = Email(id=7, email="changed@example.com")

        assert first == second
        assert hash(first) == hash(second)

    def test_different_ids_are_not_equal(self):
        assert Email(id=1, email="a@example.com") != Email(id=2, email="a@example.com")

    def test_same_id_in_other_class_is_not_equal(self):
        assert Email(id=1, email="a@example.com") != OtherEmail(id=1, email="a@example.com")
        assert Email(id=1, email="a@example.com") != User(id=1, username="u", password="p")

    def test_link_rows_compare_by_reference(self):
        link = UserEmails(user_id=1, emails_id=1)

        assert link == link
        assert link != UserEmails(user_id=1, emails_id=1)
        assert isinstance(hash(link), int)


class TestCollections:
    def test_add_unique_skips_equal_items(self):
        user = User(username="user1", password="pass1")
        email = Email(id=1, email="a@example.com")

        assert user.add_email(email) is True
        assert user.add_email(Email(id=1, email="a@example.com")) is False
        assert user.emails == [email]

    def test_add_unique_on_plain_list(self):
        items: list[Email] = []
        email = Email(email="a@example.com")

        assert add_unique(items, email) is True
        assert add_unique(items, email) is False
        assert len(items) == 1

    def test_remove_email_ignores_absent_email(self):
        user = OwningUser(username="user1", password="pass1")
        held = OwnedEmail(email="held@example.com")
        user.add_email(held)

        assert user.remove_email(OwnedEmail(email="other@example.com")) is False
        assert user.emails == [held]

    def test_remove_email_drops_held_email(self):
        user = OwningUser(username="user1", password="pass1")
        held = OwnedEmail(email="held@example.com")
        user.add_email(held)

        assert user.remove_email(held) is True
        assert user.emails == []


class TestEmbeddedEmail:
    def test_value_equality(self):
        assert EmbeddedEmail(email="a@example.com") == EmbeddedEmail(email="a@example.com")
        assert str(EmbeddedEmail(email="a@example.com")) == "a@example.com"

    def test_is_immutable(self):
        email = EmbeddedEmail(email="a@example.com")

        with pytest.raises(ValidationError):
            email.email = "b@example.com"

    def test_user_exposes_the_embedded_value(self):
        user = EmbeddedUser(username="user1", password="pass1")
        assert user.email is None

        user.add_email(EmbeddedEmail(email="user1@example.com"))

        assert user.email == EmbeddedEmail(email="user1@example.com")
        assert user.email_address == "user1@example.com"
