import sys
from pathlib import Path

from loguru import logger

from orm_relationships.runtime.config.config_data import ConfigData
from orm_relationships.runtime.context import get_config

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(config: ConfigData | None = None) -> None:
    """Reset loguru and install the sinks described by the logging config."""
    main_config = config or get_config()
    cfg = main_config.logging
    env = main_config.app.environment

    logger.remove()

    backtrace_on = env != "production"
    diagnose_on = env != "production"

    # Console: always colorized, human-readable
    logger.add(
        sys.stderr,
        level=cfg.level.upper(),
        format=PLAIN_FORMAT,
        colorize=True,
        serialize=False,
        backtrace=backtrace_on,
        diagnose=diagnose_on,
    )

    # File: JSON or plain
    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        is_json_file = cfg.format == "json"
        logger.add(
            str(path),
            level=cfg.level.upper(),
            format="{message}" if is_json_file else PLAIN_FORMAT,
            serialize=is_json_file,
            backtrace=backtrace_on,
            diagnose=diagnose_on,
        )

    logger.debug("Logging configured for environment {}", env)
