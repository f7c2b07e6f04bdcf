import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "teamboard" / "logs"

FILE_FORMAT = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def _console_level(is_debug: bool) -> int:
    if is_debug:
        return logging.DEBUG
    env_level = os.getenv('TEAMBOARD_LOG_LEVEL', '').upper()
    return getattr(logging, env_level, logging.WARNING) if env_level else logging.WARNING

def _file_handler():
    """Detailed DEBUG log under TEAMBOARD_LOG_DIR, or None if that directory can't be used."""
    override = os.getenv('TEAMBOARD_LOG_DIR', '')
    log_dir = Path(override).expanduser() if override else DEFAULT_LOG_DIR
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_dir / "teamboard.log")
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler

def setup_logging():
    """Configure the 'teamboard' logger from TEAMBOARD_DEBUG / TEAMBOARD_LOG_LEVEL / TEAMBOARD_LOG_DIR.

    Safe to call again; existing handlers are closed and replaced.
    """
    is_debug = os.getenv('TEAMBOARD_DEBUG', '').lower() in ('1', 'true', 'yes')

    logger = logging.getLogger('teamboard')
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    file_handler = _file_handler()
    if file_handler is not None:
        logger.addHandler(file_handler)

    # stderr keeps command output (e.g. `teamboard schema`) pipeable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if is_debug
        else '%(levelname)s: %(message)s'
    ))
    console_handler.setLevel(_console_level(is_debug))
    logger.addHandler(console_handler)

    logger.propagate = False
    return logger

setup_logging()

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'teamboard.{name}')
    return logging.getLogger('teamboard')
