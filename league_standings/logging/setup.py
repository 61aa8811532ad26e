import sys
import logging
from typing import Optional

from loguru import logger

from league_standings.config.settings import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[source]}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forwards records from stdlib loggers into loguru, tagged with the logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(source=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _tag_source(record) -> None:
    record["extra"].setdefault("source", record["name"])


def setup_logging(level: Optional[str] = None) -> None:
    """Sends league logs to stderr at the configured level and captures stdlib logging."""
    log_level = (level or settings.log_level).upper()
    logger.remove()
    logger.configure(patcher=_tag_source)

    logger.add(
        sys.stderr,
        level=log_level,
        format=LOG_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug(f"League logging ready at {log_level}; stdlib logging redirected.")
