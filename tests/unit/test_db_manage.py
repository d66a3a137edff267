"""Unit tests for schema creation and fixture loading."""

import pytest
from sqlalchemy import inspect, text

from orm_relationships.core.errors import SqlScriptNotFoundError
from orm_relationships.entities import EXAMPLES, get_example


def _user_tables(engine) -> set[str]:
    return {
        name
        for name in inspect(engine).get_table_names()
        if not name.startswith("sqlite_")
    }


@pytest.mark.parametrize("example", EXAMPLES, ids=lambda example: example.label)
def test_schema_script_matches_mapped_tables(example, db_service, db_manager):
    db_manager.create_schema(example)

    assert _user_tables(db_service.engine) == set(db_manager.table_names(example))


@pytest.mark.parametrize("example", EXAMPLES, ids=lambda example: example.label)
def test_every_fixture_loads_on_a_fresh_schema(example, db_manager):
    for fixture in example.fixtures():
        db_manager.create_schema(example)

        assert db_manager.load_fixture(example, fixture) > 0


def test_schema_can_be_recreated(db_service, db_manager):
    example = get_example("one_to_many_bidirectional")
    db_manager.create_schema(example)
    db_manager.load_fixture(example, "create-6-emails-with-users")

    db_manager.create_schema(example)

    with db_service.engine.connect() as connection:
        assert connection.execute(text("SELECT count(*) FROM email")).scalar() == 0


def test_load_fixture_returns_statement_count(db_manager):
    example = get_example(1)
    db_manager.create_schema(example)

    assert db_manager.load_fixture(example, "insert-5-users") == 5


def test_missing_script_runs_nothing(db_service, db_manager):
    example = get_example(2)
    db_manager.create_schema(example)

    with pytest.raises(SqlScriptNotFoundError):
        db_manager.run_scripts(example, "insert-5-emails", "no-such-script")

    with db_service.engine.connect() as connection:
        assert connection.execute(text("SELECT count(*) FROM email")).scalar() == 0


def test_failing_script_is_rolled_back(db_service, db_manager):
    example = get_example(2)
    db_manager.create_schema(example)

    # inserting the same five emails twice breaks the primary key
    with pytest.raises(Exception):
        db_manager.run_scripts(example, "insert-5-emails", "insert-5-emails")

    with db_service.engine.connect() as connection:
        assert connection.execute(text("SELECT count(*) FROM email")).scalar() == 0


def test_table_names_follow_dependencies(db_manager):
    names = db_manager.table_names(get_example(6))

    assert names.index("user_emails") > names.index("user")
    assert names.index("user_emails") > names.index("email")
