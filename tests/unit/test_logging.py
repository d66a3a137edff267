"""Unit tests for loguru configuration."""

import json

import pytest
from loguru import logger

from orm_relationships.runtime.config import AppConfig, ConfigData, LoggingConfig
from orm_relationships.runtime.logging_setup import configure_logging


@pytest.mark.usefixtures("reset_logging")
class TestConfigureLogging:
    def test_plain_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        configure_logging(
            ConfigData(logging=LoggingConfig(level="INFO", file=str(log_file)))
        )

        logger.info("schema created")
        logger.debug("not written at INFO")
        logger.remove()

        content = log_file.read_text()
        assert "schema created" in content
        assert "not written at INFO" not in content

    def test_json_file_sink(self, tmp_path):
        log_file = tmp_path / "app.json"
        configure_logging(
            ConfigData(
                app=AppConfig(environment="production"),
                logging=LoggingConfig(level="DEBUG", format="json", file=str(log_file)),
            )
        )

        logger.warning("fixture loaded")
        logger.remove()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        messages = [record["record"]["message"] for record in records]
        assert "fixture loaded" in messages

    def test_uses_active_config_without_argument(self, test_config, tmp_path):
        log_file = tmp_path / "active.log"
        test_config.logging.file = str(log_file)

        configure_logging()
        logger.info("from the active config")
        logger.remove()

        assert "from the active config" in log_file.read_text()
