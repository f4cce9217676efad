import random
from dataclasses import replace

import pytest

from constants import ReservationFailure
from domain.entities.car import Car
from domain.value_objects.reservation_constraints import ReservationConstraints
from dtos.request.reservation_request import ReservationConstraintsRequest
from exceptions import NotFoundError, ReservationError
from helpers import day, make_type
from repositories.reservation_repository import ReservationRepository
from services.manager_service import ManagerService
from services.reservation_service import ReservationService


@pytest.fixture
def single_car_db(db_session):
    """Hertz with one economy car at 40 per day, serving Brussels."""
    ManagerService(db_session).register_company(
        "Hertz", ["Brussels"], [Car(id=None, type=make_type("economy", price=40.0))]
    )
    return db_session


def _economy(start, end):
    return ReservationConstraints(start_date=start, end_date=end, car_type="economy", region="Brussels")


def test_alice_bob_scenario(single_car_db):
    alice = ReservationService(single_car_db, "alice", rng=random.Random(1))
    bob = ReservationService(single_car_db, "bob", rng=random.Random(2))

    alice.create_quote("Hertz", _economy(day(10), day(12)))
    bob.create_quote("Hertz", _economy(day(10), day(12)))
    [alice_res] = alice.confirm_quotes()

    assert alice_res.rental_price == 80.0
    assert alice_res.id is not None

    with pytest.raises(ReservationError) as exc_info:
        bob.confirm_quotes()
    assert exc_info.value.reason == ReservationFailure.NO_CAR_AVAILABLE
    assert len(bob.get_current_quotes()) == 1

    alice.cancel_reservation(alice_res)
    [bob_res] = bob.confirm_quotes()

    assert bob_res.car_renter == "bob"
    assert alice.get_reservations() == []
    assert bob.get_reservations() == [bob_res]


def test_create_quote_accepts_request_dto(single_car_db):
    session = ReservationService(single_car_db, "alice")
    request = ReservationConstraintsRequest(
        start_date=day(0),
        end_date=day(1, hours=12),
        car_type="economy",
        region="Brussels"
    )

    quote = session.create_quote("Hertz", request)

    assert quote.rental_price == 80.0
    assert session.get_current_quotes() == [quote]


def test_create_quote_failures_keep_session_empty(single_car_db):
    session = ReservationService(single_car_db, "alice")

    with pytest.raises(ReservationError):
        session.create_quote("Hertz", ReservationConstraints(day(1), day(2), "economy", "Ghent"))
    with pytest.raises(NotFoundError):
        session.create_quote("Avis", _economy(day(1), day(2)))

    assert session.get_current_quotes() == []


def test_confirm_with_no_quotes_returns_nothing(single_car_db):
    assert ReservationService(single_car_db, "alice").confirm_quotes() == []


def test_confirm_quotes_is_all_or_nothing(seeded_db):
    session = ReservationService(seeded_db, "alice", rng=random.Random(3))
    session.create_quote("Dockx", ReservationConstraints(day(1), day(3), "Economy", "Ghent"))
    session.create_quote("Hertz", ReservationConstraints(day(1), day(3), "Eco", "Leuven"))
    # Second Eco at Hertz for the same window: Hertz has a single Eco car
    session.create_quote("Hertz", ReservationConstraints(day(2), day(4), "Eco", "Leuven"))

    with pytest.raises(ReservationError):
        session.confirm_quotes()

    assert ReservationRepository(seeded_db).count() == 0
    assert len(session.get_current_quotes()) == 3


def test_confirm_quotes_across_companies(seeded_db):
    session = ReservationService(seeded_db, "alice", rng=random.Random(4))
    session.create_quote("Dockx", ReservationConstraints(day(1), day(3), "Economy", "Ghent"))
    session.create_quote("Hertz", ReservationConstraints(day(1), day(3), "Compact", "Brussels"))
    session.create_quote("Hertz", ReservationConstraints(day(1), day(3), "Compact", "Brussels"))

    reservations = session.confirm_quotes()

    assert len(reservations) == 3
    assert session.get_current_quotes() == []
    hertz_cars = {r.car_id for r in reservations if r.rental_company == "Hertz"}
    assert len(hertz_cars) == 2
    assert sorted(r.rental_company for r in session.get_reservations()) == ["Dockx", "Hertz", "Hertz"]


def test_cancel_frees_the_slot_in_the_store(single_car_db):
    session = ReservationService(single_car_db, "alice")
    session.create_quote("Hertz", _economy(day(5), day(6)))
    [reservation] = session.confirm_quotes()

    session.cancel_reservation(reservation)

    other = ReservationService(single_car_db, "bob")
    assert other.create_quote("Hertz", _economy(day(5), day(6))).car_renter == "bob"
    assert ReservationRepository(single_car_db).count() == 0


def test_cancel_unknown_car_raises(single_car_db):
    session = ReservationService(single_car_db, "alice")
    session.create_quote("Hertz", _economy(day(5), day(6)))
    [reservation] = session.confirm_quotes()

    with pytest.raises(NotFoundError):
        session.cancel_reservation(replace(reservation, car_id=9999, id=None))

    assert ReservationRepository(single_car_db).count() == 1


def test_available_car_types_are_unique_by_name(seeded_db):
    session = ReservationService(seeded_db, "alice")

    names = [t.name for t in session.get_available_car_types(day(1), day(2))]

    assert names == ["Compact", "Eco", "Economy"]


def test_cheapest_car_type(seeded_db):
    session = ReservationService(seeded_db, "alice")

    assert session.get_cheapest_car_type(day(1), day(2), "Brussels") == "Economy"
    with pytest.raises(ReservationError) as exc_info:
        session.get_cheapest_car_type(day(1), day(2), "Paris")
    assert exc_info.value.reason == ReservationFailure.NO_MATCHING_OFFER


def test_all_rental_companies(seeded_db):
    assert ReservationService(seeded_db, "alice").get_all_rental_companies() == ["Dockx", "Hertz"]


def test_bookings_with_utc_timestamps(single_car_db):
    alice = ReservationService(single_car_db, "alice")
    alice.create_quote("Hertz", ReservationConstraintsRequest(
        start_date="2024-03-10T00:00:00Z",
        end_date="2024-03-12T00:00:00Z",
        car_type="economy",
        region="Brussels"
    ))
    [reservation] = alice.confirm_quotes()

    bob = ReservationService(single_car_db, "bob")
    quote = bob.create_quote("Hertz", ReservationConstraintsRequest(
        start_date="2024-03-20T00:00:00Z",
        end_date="2024-03-22T02:00:00+02:00",
        car_type="economy",
        region="Brussels"
    ))

    assert reservation.start_date.tzinfo is None
    assert quote.end_date == day(21)
    assert bob.confirm_quotes()[0].rental_price == 80.0


def test_cancel_with_mismatched_store_id_keeps_other_bookings(single_car_db):
    alice = ReservationService(single_car_db, "alice")
    alice.create_quote("Hertz", _economy(day(10), day(12)))
    [alice_res] = alice.confirm_quotes()

    bob = ReservationService(single_car_db, "bob")
    bob.cancel_reservation(replace(alice_res, car_renter="bob", start_date=day(30), end_date=day(31)))

    assert alice.get_reservations() == [alice_res]
