"""
Reservation-specific Specifications

Concrete specifications for the reporting and lookup queries on reservations.
"""

from datetime import datetime

from sqlalchemy import and_, extract

from models import Reservation
from .specifications import Specification


class ReservationsByRenterSpec(Specification[Reservation]):
    """Reservations made by a renter."""

    def __init__(self, renter: str):
        self.renter = renter

    def is_satisfied_by(self, reservation: Reservation) -> bool:
        return reservation.car_renter == self.renter

    def to_sql_filter(self):
        return Reservation.car_renter == self.renter


class ReservationsForCompanySpec(Specification[Reservation]):
    """Reservations at a rental company."""

    def __init__(self, company_name: str):
        self.company_name = company_name

    def is_satisfied_by(self, reservation: Reservation) -> bool:
        return reservation.rental_company == self.company_name

    def to_sql_filter(self):
        return Reservation.rental_company == self.company_name


class ReservationsForCarTypeSpec(Specification[Reservation]):
    """Reservations of a car type, by name."""

    def __init__(self, car_type_name: str):
        self.car_type_name = car_type_name

    def is_satisfied_by(self, reservation: Reservation) -> bool:
        return reservation.car_type == self.car_type_name

    def to_sql_filter(self):
        return Reservation.car_type == self.car_type_name


class ReservationsForCarSpec(Specification[Reservation]):
    """Reservations attached to one car."""

    def __init__(self, car_id: int):
        self.car_id = car_id

    def is_satisfied_by(self, reservation: Reservation) -> bool:
        return reservation.car_id == self.car_id

    def to_sql_filter(self):
        return Reservation.car_id == self.car_id


class ReservationsInYearSpec(Specification[Reservation]):
    """Reservations starting in a calendar year."""

    def __init__(self, year: int):
        self.year = year

    def is_satisfied_by(self, reservation: Reservation) -> bool:
        return reservation.start_date.year == self.year

    def to_sql_filter(self):
        return extract('year', Reservation.start_date) == self.year


class ReservationsOverlappingSpec(Specification[Reservation]):
    """Reservations intersecting the half-open window [start, end)."""

    def __init__(self, start: datetime, end: datetime):
        self.start = start
        self.end = end

    def is_satisfied_by(self, reservation: Reservation) -> bool:
        return reservation.start_date < self.end and reservation.end_date > self.start

    def to_sql_filter(self):
        return and_(
            Reservation.start_date < self.end,
            Reservation.end_date > self.start
        )


class ReservationMatchingSpec(Specification[Reservation]):
    """The stored row of a domain reservation: same car, renter and period."""

    def __init__(self, car_id: int, renter: str, start: datetime, end: datetime):
        self.car_id = car_id
        self.renter = renter
        self.start = start
        self.end = end

    def is_satisfied_by(self, reservation: Reservation) -> bool:
        return (
            reservation.car_id == self.car_id
            and reservation.car_renter == self.renter
            and reservation.start_date == self.start
            and reservation.end_date == self.end
        )

    def to_sql_filter(self):
        return and_(
            Reservation.car_id == self.car_id,
            Reservation.car_renter == self.renter,
            Reservation.start_date == self.start,
            Reservation.end_date == self.end
        )
