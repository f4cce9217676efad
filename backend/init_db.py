from database import engine, Base, SessionLocal
from sqlalchemy.orm import sessionmaker
from constants import SeedCompanies
from config.rental_config import get_data_dir
from services.manager_service import ManagerService
from pathlib import Path
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def seed_companies(db, data_dir: Optional[Path] = None) -> int:
    """
    Register the default companies that are not in the database yet.

    Args:
        db: Database session
        data_dir: Directory with the fleet files (defaults to configuration)

    Returns:
        Number of companies registered
    """
    data_dir = Path(data_dir or get_data_dir())
    manager = ManagerService(db)
    existing = set(manager.company_repo.get_all_names())
    registered = 0

    for name, (fleet_file, regions) in SeedCompanies.DEFAULTS.items():
        if name in existing:
            logger.debug(f"Company {name} already registered")
            continue
        fleet_path = data_dir / fleet_file
        if not fleet_path.is_file():
            logger.warning(f"Skipping {name}: fleet file {fleet_path} not found")
            continue
        manager.load_company_from_file(fleet_path, name, regions)
        registered += 1

    return registered


def init_database(seed: bool = True, bind=None):
    """Create all tables and register the default companies on bind (default: the configured engine)"""
    Base.metadata.create_all(bind=bind or engine)

    if not seed:
        return

    db = sessionmaker(bind=bind)() if bind is not None else SessionLocal()
    try:
        registered = seed_companies(db)
        logger.info(f"Database initialized, {registered} company(ies) registered")
    finally:
        db.close()


if __name__ == "__main__":
    import argparse
    from utils.logging_utils import configure_logging

    parser = argparse.ArgumentParser(description="Create the schema and register the default companies")
    parser.add_argument("--no-seed", action="store_true", help="Only create the tables")
    args = parser.parse_args()

    configure_logging()
    init_database(seed=not args.no_seed)
    print("✅ Database initialized successfully")
