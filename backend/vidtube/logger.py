"""Logging setup. Modules log through the named loggers at the bottom."""

import logging
import sys

from vidtube.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers kept at WARNING so request logs stay readable
QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "urllib3")


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root handler.

    Args:
        level: Level name such as "INFO"; defaults to the configured level
    """
    level_name = (level or settings.effective_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    if not settings.debug:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``vidtube`` namespace, e.g. ``vidtube.engagement``."""
    return logging.getLogger(f"vidtube.{name}")


configure_logging()

app_logger = get_logger("app")
db_logger = get_logger("database")
redis_logger = get_logger("redis")
auth_logger = get_logger("auth")
api_logger = get_logger("api")
engagement_logger = get_logger("engagement")
