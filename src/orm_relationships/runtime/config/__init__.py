from .config_data import AppConfig, ConfigData, DatabaseConfig, LoggingConfig
from .config_template import load_templated_yaml, parse_templated_yaml, substitute_env_vars
from .settings import EnvironmentSettings

__all__ = [
    "AppConfig",
    "ConfigData",
    "DatabaseConfig",
    "EnvironmentSettings",
    "LoggingConfig",
    "load_templated_yaml",
    "parse_templated_yaml",
    "substitute_env_vars",
]
