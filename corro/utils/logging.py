import logging
from pathlib import Path

from corro import config

_logging_configured = False
_log_file_path: Path | None = None

LOGGER_NAME = "corro"


def setup_logging(level: str | None = None, log_file_name: str | None = None) -> logging.Logger:
    """
    Setup logging for the `corro` logger.

    Messages always go to stderr. When a log file name is given (or set via
    CORRO_LOG_FILE_NAME) they are also appended to `log/<name>` under the
    current working directory.

    Log levels:
    - CRITICAL
    - ERROR
    - WARNING
    - INFO
    - DEBUG
    - NOTSET
    """
    global _logging_configured, _log_file_path

    logger = logging.getLogger(LOGGER_NAME)
    file_name = log_file_name or config.LOG_FILE_NAME
    log_file = Path.cwd() / "log" / file_name if file_name else None

    # If already configured and path matches, only adjust the level
    if _logging_configured and _log_file_path == log_file:
        logger.setLevel((level or config.LOG_LEVEL).upper())
        return logger

    logger.setLevel((level or config.LOG_LEVEL).upper())

    # Clear any existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), mode='a')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    _log_file_path = log_file
    _logging_configured = True
    logger.debug("Logging configured successfully")
    return logger


def get_log_file_path() -> Path | None:
    return _log_file_path
