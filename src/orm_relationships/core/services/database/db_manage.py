"""Schema creation and fixture loading from each example's SQL scripts."""

from loguru import logger

from orm_relationships.core.services.database.db_session import DbSessionService
from orm_relationships.core.services.database.sql_scripts import run_script
from orm_relationships.entities._base import SCHEMA_SCRIPT, ExampleDefinition


class DbManageService:
    def __init__(self, session_service: DbSessionService):
        self._session_service = session_service

    def create_schema(self, example: ExampleDefinition) -> None:
        """Drop and recreate the example's tables."""
        self.run_scripts(example, SCHEMA_SCRIPT)
        logger.info("Schema created for example {}", example.label)

    def load_fixture(self, example: ExampleDefinition, fixture: str) -> int:
        """Run a named fixture script. Returns the number of statements executed."""
        count = self.run_scripts(example, fixture)
        logger.info("Loaded fixture {} for example {}", fixture, example.label)
        return count

    def run_scripts(self, example: ExampleDefinition, *scripts: str) -> int:
        """Run scripts in order inside one transaction.

        Raises:
            SqlScriptNotFoundError: If any script is missing; nothing is run.
        """
        paths = [example.script_path(script) for script in scripts]
        count = 0
        with self._session_service.engine.begin() as connection:
            for path in paths:
                count += run_script(connection, path)
        return count

    def table_names(self, example: ExampleDefinition) -> list[str]:
        """Names of the tables the example maps, in dependency order."""
        return [table.name for table in example.metadata.sorted_tables]
