import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUPS = 5


def _default_log_dir() -> Path:
    return Path(os.getenv('LOG_DIR', Path(__file__).parent.parent / 'logs'))


def _file_handler(log_dir: Path, formatter: logging.Formatter) -> Optional[logging.Handler]:
    """Rotating file handler under log_dir, or None if the directory can't be written."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_dir / 'app.log',
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS
        )
    except OSError:
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_logger(name: str = 'lead_forms', log_level: str = None, log_dir: Optional[Path] = None):
    """
    Setup the application logger.

    Logs go to the console and, when LOG_DIR is writable, to a rotating
    app.log file. Calling this again for the same name returns the
    existing logger untouched.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level_name = (log_level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_dir = Path(log_dir) if log_dir is not None else _default_log_dir()
    file_handler = _file_handler(log_dir, formatter)
    if file_handler is None:
        logger.warning(f"Log directory {log_dir} is not writable; logging to console only")
    else:
        logger.addHandler(file_handler)

    return logger


logger = setup_logger()
