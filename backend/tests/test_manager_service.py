import random
from pathlib import Path

import pytest

from domain.entities.car import Car
from domain.value_objects.reservation_constraints import ReservationConstraints
from dtos.request.reservation_request import CompanyRegistrationRequest
from exceptions import NotFoundError, ValidationError
from helpers import day, make_type
from services.manager_service import ManagerService
from services.reservation_service import ReservationService

DATA_DIR = Path(__file__).parent.parent / "data"


def _book(db, renter, company, car_type, region, start, end):
    session = ReservationService(db, renter, rng=random.Random(7))
    session.create_quote(company, ReservationConstraints(start, end, car_type, region))
    return session.confirm_quotes()[0]


@pytest.fixture
def booked_db(seeded_db):
    """seeded_db with alice x2, bob x2 and carol x1 reservations."""
    _book(seeded_db, "alice", "Hertz", "Compact", "Brussels", day(1), day(3))
    _book(seeded_db, "alice", "Hertz", "Eco", "Leuven", day(1), day(3))
    _book(seeded_db, "bob", "Hertz", "Compact", "Brussels", day(2), day(4))
    _book(seeded_db, "bob", "Dockx", "Economy", "Ghent", day(2), day(4))
    _book(seeded_db, "carol", "Hertz", "Compact", "Leuven", day(10), day(11))
    return seeded_db


def test_register_company_assigns_car_ids(db_session):
    manager = ManagerService(db_session)

    company = manager.register_company(
        "Hertz", ["Brussels"], [Car(id=None, type=make_type("Compact")) for _ in range(3)]
    )

    ids = [car.id for car in company.cars]
    assert None not in ids
    assert len(set(ids)) == 3
    assert manager.get_car_ids("Hertz", "Compact") == set(ids)


def test_register_company_with_repeated_regions(db_session):
    company = ManagerService(db_session).register_company(
        "Avis", ["Ghent", "Namur", "Ghent"], [Car(id=None, type=make_type("City"))]
    )

    assert company.regions == ["Ghent", "Namur"]


def test_register_duplicate_company_rejected(seeded_db):
    with pytest.raises(ValidationError):
        ManagerService(seeded_db).register_company("Hertz", ["Ghent"], [])


def test_get_car_types(seeded_db):
    manager = ManagerService(seeded_db)

    assert [t.name for t in manager.get_car_types("Hertz")] == ["Compact", "Eco"]
    with pytest.raises(NotFoundError):
        manager.get_car_types("Avis")


def test_get_car_ids_for_unknown_type_is_empty(seeded_db):
    assert ManagerService(seeded_db).get_car_ids("Hertz", "Van") == set()


def test_reservation_counts(booked_db):
    manager = ManagerService(booked_db)

    assert manager.get_number_of_reservations("Hertz", "Compact") == 3
    assert manager.get_number_of_reservations("Hertz", "Eco") == 1
    assert manager.get_number_of_reservations("Dockx", "Compact") == 0
    assert manager.get_number_of_reservations_by("alice") == 2
    assert manager.get_number_of_reservations_by("dave") == 0


def test_reservation_count_per_car(booked_db):
    manager = ManagerService(booked_db)
    compact_ids = manager.get_car_ids("Hertz", "Compact")

    per_car = [manager.get_number_of_reservations("Hertz", "Compact", car_id) for car_id in compact_ids]

    assert sum(per_car) == 3


def test_best_clients(booked_db):
    manager = ManagerService(booked_db)

    assert manager.get_best_clients() == {"alice", "bob"}
    assert manager.get_clients_with_reservation_count(1) == {"carol"}


def test_best_clients_without_reservations(seeded_db):
    assert ManagerService(seeded_db).get_best_clients() == set()


def test_most_popular_car_type(booked_db):
    manager = ManagerService(booked_db)

    most_popular = manager.get_most_popular_car_type_in("Hertz", 2024)

    assert most_popular.name == "Compact"
    assert most_popular.rental_price_per_day == 55.0
    assert manager.get_most_popular_car_type_in("Hertz", 2023) is None
    with pytest.raises(NotFoundError):
        manager.get_most_popular_car_type_in("Avis", 2024)


def test_most_popular_tie_is_alphabetical(seeded_db):
    _book(seeded_db, "alice", "Dockx", "Economy", "Ghent", day(1), day(2))
    _book(seeded_db, "bob", "Dockx", "Compact", "Ghent", day(1), day(2))

    assert ManagerService(seeded_db).get_most_popular_car_type_in("Dockx", 2024).name == "Compact"


def test_company_report(booked_db):
    report = ManagerService(booked_db).build_company_report("Hertz", 2024)

    assert report.company == "Hertz"
    assert report.regions == ["Brussels", "Leuven"]
    assert report.reservations_per_car_type == {"Compact": 3, "Eco": 1}
    assert report.most_popular_car_type == "Compact"
    assert [t.name for t in report.car_types] == ["Compact", "Eco"]


def test_company_report_unknown_company(seeded_db):
    with pytest.raises(NotFoundError):
        ManagerService(seeded_db).build_company_report("Avis", 2024)


def test_load_company_from_file(db_session):
    manager = ManagerService(db_session)

    company = manager.load_company_from_file(DATA_DIR / "hertz.csv", "Hertz", ["Brussels"])

    assert len(company.cars) == 27
    assert len(manager.get_car_ids("Hertz", "Compact")) == 8
    assert company.get_type("Van").smoking_allowed is True


def test_register_from_request(db_session, tmp_path):
    fleet = tmp_path / "avis.csv"
    fleet.write_text("# test fleet\nCity:4:200:30:false:2\n", encoding="utf-8")
    request = CompanyRegistrationRequest(name="Avis", regions=["Ghent", "Ghent"], fleet_file=str(fleet))

    company = ManagerService(db_session).register(request)

    assert company.regions == ["Ghent"]
    assert len(company.cars) == 2


def test_load_company_from_missing_file(db_session, tmp_path):
    manager = ManagerService(db_session)

    with pytest.raises(ValidationError):
        manager.load_company_from_file(tmp_path / "missing.csv", "Avis", ["Ghent"])

    assert manager.company_repo.get_all_names() == []
