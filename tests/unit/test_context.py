"""Unit tests for the configuration context."""

import pytest

from orm_relationships.runtime.config import ConfigData, DatabaseConfig, LoggingConfig
from orm_relationships.runtime.context import (
    AppContext,
    get_config,
    get_context,
    merge_configs,
    set_config,
    with_context,
)


@pytest.mark.usefixtures("test_config")
class TestContext:
    def test_context_holds_installed_config(self, test_config):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is test_config
        assert get_config() is test_config

    def test_with_context_overrides_only_what_is_set(self, test_config):
        override = ConfigData(logging=LoggingConfig(level="DEBUG"))

        with with_context(override):
            config = get_config()
            assert config.logging.level == "DEBUG"
            assert config.database.url == test_config.database.url

        assert get_config() is test_config

    def test_nested_overrides_restore_in_order(self):
        level1 = ConfigData(database=DatabaseConfig(url="sqlite:///level1.db"))
        level2 = ConfigData(logging=LoggingConfig(level="ERROR"))

        with with_context(level1):
            with with_context(level2):
                config = get_config()
                assert config.database.url == "sqlite:///level1.db"
                assert config.logging.level == "ERROR"
            assert get_config().logging.level == "INFO"
            assert get_config().database.url == "sqlite:///level1.db"

        assert get_config().database.url == "sqlite:///:memory:"

    def test_with_context_none_is_a_no_op(self, test_config):
        with with_context(None):
            assert get_config() is test_config

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="ConfigData"):
            with with_context({"database": {"url": "sqlite://"}}):
                pass

    def test_override_is_restored_after_error(self, test_config):
        override = ConfigData(logging=LoggingConfig(level="DEBUG"))

        with pytest.raises(RuntimeError):
            with with_context(override):
                raise RuntimeError("boom")

        assert get_config() is test_config

    def test_set_config_replaces_configuration(self):
        replacement = ConfigData(logging=LoggingConfig(level="WARNING"))

        set_config(replacement)

        assert get_config() is replacement


def test_merge_configs_keeps_base_values():
    base = ConfigData(
        database=DatabaseConfig(url="sqlite:///base.db", echo=True),
        logging=LoggingConfig(level="WARNING"),
    )
    override = ConfigData(database=DatabaseConfig(url="sqlite:///override.db"))

    merged = merge_configs(base, override)

    assert merged.database.url == "sqlite:///override.db"
    assert merged.database.echo is True
    assert merged.logging.level == "WARNING"
