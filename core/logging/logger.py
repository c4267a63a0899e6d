import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


# Global set to track configured loggers and prevent duplicate handlers
_configured_loggers = set()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Optional[Union[int, str]] = None,
    log_dir: Optional[str] = "logs",
    console: bool = True
):
    """
    Setup a logger with rotating file handler and console handler.

    Args:
        name: Logger name (will write to <log_dir>/<name>.log by default)
        log_file: Optional custom log file path
        level: Logging level (defaults to config.settings.LOG_LEVEL)
        log_dir: Directory for the default log file; empty/None disables file logging
        console: Whether to add console handler

    Returns:
        Configured logger instance
    """
    # Import here to avoid circular imports
    try:
        from config.settings import LOG_LEVEL
    except ImportError:
        LOG_LEVEL = "INFO"

    # Convert string level to int if needed
    if level is None:
        level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    elif isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent adding duplicate handlers if logger was already configured
    if name in _configured_loggers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file is None and log_dir:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = logs_dir / f"{name}.log"

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_file),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    _configured_loggers.add(name)

    return logger
