import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the module-level engine off the user's home database
os.environ.setdefault('CAR_RENTAL_DB_URL', 'sqlite:///:memory:')

# Now import after path is set
import random

import pytest
from sqlalchemy.orm import sessionmaker

from database import build_engine
from domain.aggregates.car_rental_company import CarRentalCompany
from domain.entities.car import Car
from models import Base
from services.manager_service import ManagerService

from helpers import make_fleet, make_type


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = build_engine('sqlite:///:memory:')
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def economy():
    return make_type("economy", price=40.0)


@pytest.fixture
def hertz(economy, rng):
    """Hertz with a single economy car, serving Brussels."""
    return CarRentalCompany("Hertz", ["Brussels"], make_fleet((economy, 1)), rng=rng)


@pytest.fixture
def seeded_db(db_session):
    """
    Database with two companies:
    - Hertz (Brussels, Leuven): 2 Compact at 55, 1 Eco at 40
    - Dockx (Brussels, Ghent): 1 Compact at 50, 1 Economy at 35
    """
    manager = ManagerService(db_session)
    compact = make_type("Compact", price=55.0)
    eco = make_type("Eco", price=40.0)
    manager.register_company(
        "Hertz", ["Brussels", "Leuven"],
        [Car(id=None, type=compact), Car(id=None, type=compact), Car(id=None, type=eco)]
    )
    manager.register_company(
        "Dockx", ["Brussels", "Ghent"],
        [Car(id=None, type=make_type("Compact", price=50.0)),
         Car(id=None, type=make_type("Economy", price=35.0, smoking=True))]
    )
    return db_session
