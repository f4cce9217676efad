"""
Runtime Configuration

Resolves database location, logging and seed data settings from the
environment. Every value has a default so the backend runs without any
variables set.

Variables:
- CAR_RENTAL_DB_URL: SQLAlchemy database URL
- CAR_RENTAL_LOG_DIR: Directory for the rotating log file
- CAR_RENTAL_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
- CAR_RENTAL_DATA_DIR: Directory holding fleet files used for seeding
"""
import os
import logging
from pathlib import Path

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

APP_HOME = Path.home() / ".car_rental"

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_database_url() -> str:
    """
    Get the database URL.

    Returns:
        Value of CAR_RENTAL_DB_URL, or a SQLite file in the application home
    """
    url = os.environ.get('CAR_RENTAL_DB_URL')
    if url:
        return url

    db_path = APP_HOME / "rental.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f'sqlite:///{db_path}'


def get_log_dir() -> Path:
    """Directory for log files (created if missing)."""
    log_dir = Path(os.environ.get('CAR_RENTAL_LOG_DIR', APP_HOME / "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_log_level() -> int:
    """
    Get the configured log level.

    Returns:
        logging level constant

    Raises:
        ConfigurationError: If CAR_RENTAL_LOG_LEVEL is not a known level
    """
    level_name = os.environ.get('CAR_RENTAL_LOG_LEVEL', 'INFO').upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level: {level_name}",
            missing_keys=['CAR_RENTAL_LOG_LEVEL']
        )
    return getattr(logging, level_name)


def get_data_dir() -> Path:
    """
    Directory containing fleet files.

    Defaults to the data/ folder shipped next to the backend sources.
    """
    default = Path(__file__).parent.parent / "data"
    return Path(os.environ.get('CAR_RENTAL_DATA_DIR', default))
