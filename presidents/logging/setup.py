import sys
import logging
from typing import Optional, Union

from loguru import logger

from presidents.config.settings import normalize_log_level, settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _loguru_level(record: logging.LogRecord) -> Union[str, int]:
    try:
        return logger.level(record.levelname).name
    except ValueError:
        return record.levelno


class InterceptHandler(logging.Handler):
    """Forwards standard logging records (bs4 parser warnings etc.) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Skip logging's own frames so loguru reports the original call site
        frame, depth = sys._getframe(1), 1
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(stdlib_logger=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(_loguru_level(record), record.getMessage())


def setup_logging(level: Optional[str] = None) -> str:
    """Installs the stderr sink and returns the level actually used."""
    if level is None:
        level = settings.log_level
    else:
        level = normalize_log_level(level, origin="--log-level")

    logger.remove()
    # stdout is reserved for the rendered rows
    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug(f"Logging initialized with level {level}, standard logging intercepted")
    return level
