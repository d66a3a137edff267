from .db_manage import DbManageService
from .db_session import DbSessionService, build_engine, enable_sqlite_foreign_keys
from .sql_scripts import execute_statements, run_script, split_statements

__all__ = [
    "DbManageService",
    "DbSessionService",
    "build_engine",
    "enable_sqlite_foreign_keys",
    "execute_statements",
    "run_script",
    "split_statements",
]
