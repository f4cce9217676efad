from dataclasses import replace

import pytest

from helpers import day, make_type
from constants import ReservationFailure
from domain.entities.car import Car
from domain.value_objects.reservation import Reservation
from exceptions import ReservationError


def _reservation(car_id, start, end, renter="alice"):
    return Reservation(
        car_renter=renter,
        start_date=start,
        end_date=end,
        rental_company="Hertz",
        car_type="economy",
        rental_price=80.0,
        car_id=car_id
    )


def test_car_type_identity_is_its_name():
    cheap = make_type("economy", price=40.0, seats=4)
    pricey = make_type("economy", price=90.0, seats=7, smoking=True)

    assert cheap == pricey
    assert hash(cheap) == hash(pricey)
    assert len({cheap, pricey}) == 1
    assert cheap != make_type("premium", price=40.0)


def test_car_type_string_form():
    car_type = make_type("Compact", price=55.0, seats=4, trunk=250.0)

    assert str(car_type) == "Car type: Compact \t[seats: 4, price: 55.00, smoking: false, trunk: 250l]"


def test_car_availability_follows_reservations():
    car = Car(1, make_type("economy"))
    car.add_reservation(_reservation(1, day(10), day(12)))

    assert not car.is_available(day(11), day(13))
    assert car.is_available(day(12), day(14))
    assert car.is_available(day(5), day(10))


def test_overlapping_reservation_is_refused():
    car = Car(1, make_type("economy"))
    car.add_reservation(_reservation(1, day(10), day(12)))

    with pytest.raises(ReservationError) as exc_info:
        car.add_reservation(_reservation(1, day(11), day(15), renter="bob"))

    assert exc_info.value.reason == ReservationFailure.NO_CAR_AVAILABLE
    assert len(car.reservations) == 1


def test_remove_reservation():
    car = Car(1, make_type("economy"))
    res = _reservation(1, day(10), day(12))
    car.add_reservation(res)

    assert car.remove_reservation(res) is True
    assert car.reservations == ()
    assert car.remove_reservation(res) is False


def test_reservation_equality_ignores_store_id():
    res = _reservation(1, day(10), day(12))
    stored = replace(res, id=17)

    assert res == stored


def test_reservations_snapshot_is_read_only():
    car = Car(1, make_type("economy"))
    car.add_reservation(_reservation(1, day(1), day(2)))

    snapshot = car.reservations
    car.add_reservation(_reservation(1, day(3), day(4)))

    assert len(snapshot) == 1
    assert len(car.reservations) == 2
