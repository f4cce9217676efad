"""
Builders shared by the test modules.
"""
from datetime import datetime, timedelta

from domain.entities.car import Car
from domain.entities.car_type import CarType

DAY0 = datetime(2024, 3, 1)


def day(n: int, hours: int = 0) -> datetime:
    """Midnight of day n counted from DAY0, plus optional hours."""
    return DAY0 + timedelta(days=n, hours=hours)


def make_type(name: str, price: float = 40.0, seats: int = 4, trunk: float = 250.0, smoking: bool = False) -> CarType:
    return CarType(
        name=name,
        nb_of_seats=seats,
        trunk_space=trunk,
        rental_price_per_day=price,
        smoking_allowed=smoking
    )


def make_fleet(*specs):
    """Build cars from (car_type, count) pairs, numbering ids from 1."""
    cars = []
    for car_type, count in specs:
        for _ in range(count):
            cars.append(Car(id=len(cars) + 1, type=car_type))
    return cars
