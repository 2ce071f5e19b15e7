import logging
import os
import sys
from pathlib import Path

LOG_LEVEL_ENV = "MOVABLETYPE_LOG_LEVEL"


def setup_logging(
    log_level: str | int | None = None, log_file: str | Path | None = None
) -> logging.Logger:
    """
    Configure logging for an application that embeds the parser.

    The library itself only emits records through module loggers; call this
    from the application's entry point.

    Args:
        log_level: The logging level; falls back to MOVABLETYPE_LOG_LEVEL,
            then INFO
        log_file: Optional path to a log file
    """
    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()

    # Create logs directory if logging to file
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger
