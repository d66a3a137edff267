"""Database engine and session factory used by the examples, the CLI and the tests."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from orm_relationships.runtime.config.config_data import DatabaseConfig
from orm_relationships.runtime.context import get_config


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite DBAPI connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, _connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(db_config: DatabaseConfig) -> Engine:
    """Create an engine for ``db_config``.

    In-memory SQLite gets a ``StaticPool`` so every session shares the one
    connection that holds the database.
    """
    engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

    if db_config.is_sqlite:
        engine_kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": db_config.pool_timeout,
        }
        if db_config.is_in_memory:
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True
        engine_kwargs["pool_timeout"] = db_config.pool_timeout

    engine = create_engine(db_config.url, **engine_kwargs)

    if db_config.is_sqlite and db_config.enforce_foreign_keys:
        enable_sqlite_foreign_keys(engine)

    return engine


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the database engine from ``db_config`` or the active config."""
        db_config = db_config or get_config().database
        logger.info("Initializing database engine for {}", db_config.url)
        self._config = db_config
        self._engine = build_engine(db_config)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # keep loaded state readable after commits
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session, committing on success and rolling back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Check the database answers a trivial query."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed: {}: {}", type(e).__name__, e
            )
            return False

    def foreign_keys_enabled(self) -> bool:
        """Report whether SQLite foreign key enforcement is active."""
        if not self._config.is_sqlite:
            return True
        with self._engine.connect() as connection:
            return bool(connection.execute(text("PRAGMA foreign_keys")).scalar())

    def dispose(self) -> None:
        """Release every pooled connection."""
        self._engine.dispose()
