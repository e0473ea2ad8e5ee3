import logging
import os

from .config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
# Log file lines carry a short en-GB date and a medium time, e.g. 15/09/2024, 15:00:00.
FILE_DATE_FORMAT = "%d/%m/%Y, %H:%M:%S"


def setup_logging(settings: Settings) -> None:
    """Configure application-wide logging based on settings.

    The format includes timestamp, log level, logger name, and message.
    When settings.log_file is set, lines are also appended to that file.
    """
    log_level_name = settings.log_level.upper()
    level = getattr(logging, log_level_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    if settings.log_file and not _has_file_handler(root, settings.log_file):
        handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=FILE_DATE_FORMAT))
        root.addHandler(handler)

    # Align uvicorn loggers with the application log level for consistency.
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(level)


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target
        for h in logger.handlers
    )
