"""Unit tests for the example registry and example definitions."""

import pytest

from orm_relationships.core.errors import SqlScriptNotFoundError, UnknownExampleError
from orm_relationships.entities import EXAMPLES, get_example, list_examples
from orm_relationships.entities.one_to_many_bidirectional import (
    EXAMPLE as ONE_TO_MANY_BIDIRECTIONAL,
)


class TestGetExample:
    @pytest.mark.parametrize(
        "key",
        [
            "one_to_many_bidirectional",
            "005-one-to-many-bidirectional",
            "005",
            "5",
            5,
        ],
    )
    def test_lookup_by_slug_label_or_number(self, key):
        assert get_example(key) is ONE_TO_MANY_BIDIRECTIONAL

    @pytest.mark.parametrize("key", ["nope", "13", 0, ""])
    def test_unknown_example_raises(self, key):
        with pytest.raises(UnknownExampleError) as exc_info:
            get_example(key)

        assert isinstance(exc_info.value, KeyError)
        assert str(exc_info.value) == f"Unknown example: {str(key)!r}"


def test_examples_are_numbered_one_to_twelve():
    assert [example.number for example in list_examples()] == list(range(1, 13))
    assert len({example.slug for example in EXAMPLES}) == 12


def test_every_example_has_its_own_metadata():
    metadata = {id(example.metadata) for example in EXAMPLES}

    assert len(metadata) == len(EXAMPLES)


def test_only_the_embedded_example_lacks_an_email_repository():
    without = [example.number for example in EXAMPLES if example.email_repository is None]

    assert without == [1]


class TestExampleDefinition:
    def test_label(self):
        assert ONE_TO_MANY_BIDIRECTIONAL.label == "005-one-to-many-bidirectional"

    def test_fixtures_exclude_schema(self):
        assert ONE_TO_MANY_BIDIRECTIONAL.fixtures() == [
            "create-1-user",
            "create-5-users",
            "create-6-emails-with-users",
        ]

    def test_script_path_accepts_names_with_or_without_extension(self):
        with_extension = ONE_TO_MANY_BIDIRECTIONAL.script_path("create-1-user.sql")
        without_extension = ONE_TO_MANY_BIDIRECTIONAL.script_path("create-1-user")

        assert with_extension == without_extension
        assert with_extension.is_file()

    def test_missing_script_raises(self):
        with pytest.raises(SqlScriptNotFoundError) as exc_info:
            ONE_TO_MANY_BIDIRECTIONAL.script_path("create-100-users")

        assert isinstance(exc_info.value, FileNotFoundError)
        assert exc_info.value.example == "005-one-to-many-bidirectional"
        assert exc_info.value.script == "create-100-users.sql"

    def test_repositories_are_bound_to_the_session(self, session):
        user_repository, email_repository = ONE_TO_MANY_BIDIRECTIONAL.repositories(session)

        assert user_repository.session is session
        assert email_repository.session is session
        assert user_repository.entity_name == "User"
        assert email_repository.entity_name == "Email"
