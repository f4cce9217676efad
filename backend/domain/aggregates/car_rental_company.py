"""
CarRentalCompany Aggregate

Owns a fleet of cars and turns reservation constraints into quotes and
quotes into reservations. All availability checks run against the
reservation lists of the cars in memory; loading and saving the aggregate
is the caller's job.
"""

import logging
import random
from datetime import datetime
from typing import Iterable, List, Optional, Set, Union

from constants import ReservationFailure
from exceptions import NotFoundError, ReservationError
from ..entities.car import Car
from ..entities.car_type import CarType
from ..value_objects.quote import Quote
from ..value_objects.rental_period import RentalPeriod
from ..value_objects.reservation import Reservation
from ..value_objects.reservation_constraints import ReservationConstraints

logger = logging.getLogger(__name__)


def calculate_rental_price(rental_price_per_day: float, start: datetime, end: datetime) -> float:
    """
    Price of renting at a daily rate for [start, end).

    Partial days are charged as full days.
    """
    return rental_price_per_day * RentalPeriod(start, end).duration_in_days()


class CarRentalCompany:
    """
    Aggregate root for a rental company.

    Args:
        name: Company name (identity)
        regions: Regions the company serves (duplicates dropped, order kept)
        cars: Fleet; the set of car types is derived from it
        rng: Random source used to pick a car on confirmation
    """

    def __init__(
        self,
        name: str,
        regions: Iterable[str],
        cars: Iterable[Car],
        rng: Optional[random.Random] = None
    ):
        logger.info(f"<{name}> Starting up CRC {name} ...")
        self.name = name
        self.regions: List[str] = list(dict.fromkeys(regions))
        self.cars: List[Car] = list(cars)
        self.car_types: Set[CarType] = {car.type for car in self.cars}
        self._rng = rng or random.Random()

    # Car types

    def get_type(self, car_type_name: str) -> CarType:
        """
        Look up a car type by name.

        Raises:
            NotFoundError: If the company has no such car type
        """
        for car_type in self.car_types:
            if car_type.name == car_type_name:
                return car_type
        raise NotFoundError("car type", car_type_name, scope=self.name)

    def has_type(self, car_type_name: str) -> bool:
        return any(car_type.name == car_type_name for car_type in self.car_types)

    def is_available(self, car_type_name: str, start: datetime, end: datetime) -> bool:
        """
        Check if at least one car of the named type is free for [start, end).

        Raises:
            NotFoundError: If the company has no such car type
        """
        logger.info(f"<{self.name}> Checking availability for car type {car_type_name}")
        return self.get_type(car_type_name) in self.get_available_car_types(start, end)

    def get_available_car_types(self, start: datetime, end: datetime) -> Set[CarType]:
        return {car.type for car in self.cars if car.is_available(start, end)}

    # Cars

    def get_car(self, uid: int) -> Car:
        """
        Look up a car by id.

        Raises:
            NotFoundError: If no car of this company has the id
        """
        for car in self.cars:
            if car.id == uid:
                return car
        raise NotFoundError("car", uid, scope=self.name)

    def get_cars(self, car_type: Union[CarType, str]) -> List[Car]:
        """All cars of a type, given as a CarType or as its name."""
        type_name = car_type.name if isinstance(car_type, CarType) else car_type
        return [car for car in self.cars if car.type.name == type_name]

    def get_available_cars(self, car_type_name: str, start: datetime, end: datetime) -> List[Car]:
        return [
            car for car in self.cars
            if car.type.name == car_type_name and car.is_available(start, end)
        ]

    def serves(self, region: str) -> bool:
        return region in self.regions

    # Reservations

    def create_quote(self, constraints: ReservationConstraints, guest: str) -> Quote:
        """
        Price the constraints for a guest without reserving anything.

        Raises:
            ReservationError: If the region is not served, the car type is
                unknown, or no car of the type is free in the window
        """
        logger.info(
            f"<{self.name}> Creating tentative reservation for {guest} with constraints {constraints}"
        )

        if not self.serves(constraints.region):
            raise ReservationError(
                ReservationFailure.REGION_NOT_SERVED,
                f"<{self.name}> Region {constraints.region} is not served.",
                company=self.name
            )
        if not self.has_type(constraints.car_type):
            raise ReservationError(
                ReservationFailure.UNKNOWN_CAR_TYPE,
                f"<{self.name}> No car type of name {constraints.car_type}.",
                company=self.name
            )
        if not self.is_available(constraints.car_type, constraints.start_date, constraints.end_date):
            raise ReservationError(
                ReservationFailure.CAR_TYPE_UNAVAILABLE,
                f"<{self.name}> No cars available to satisfy the given constraints.",
                company=self.name
            )

        car_type = self.get_type(constraints.car_type)
        price = calculate_rental_price(
            car_type.rental_price_per_day, constraints.start_date, constraints.end_date
        )
        return Quote(
            car_renter=guest,
            start_date=constraints.start_date,
            end_date=constraints.end_date,
            rental_company=self.name,
            car_type=constraints.car_type,
            rental_price=price,
        )

    def confirm_quote(self, quote: Quote) -> Reservation:
        """
        Turn a quote into a reservation on a randomly chosen free car.

        Raises:
            ReservationError: If every car of the quoted type is taken
        """
        logger.info(f"<{self.name}> Reservation of {quote}")
        available_cars = self.get_available_cars(quote.car_type, quote.start_date, quote.end_date)
        if not available_cars:
            raise ReservationError(
                ReservationFailure.NO_CAR_AVAILABLE,
                f"Reservation failed, all cars of type {quote.car_type} are unavailable "
                f"from {quote.start_date} to {quote.end_date}",
                company=self.name
            )
        car = self._rng.choice(available_cars)

        reservation = Reservation.from_quote(quote, car.id)
        car.add_reservation(reservation)
        return reservation

    def cancel_reservation(self, reservation: Reservation) -> bool:
        """
        Remove a reservation from the car it is attached to.

        Returns:
            True if the car held the reservation

        Raises:
            NotFoundError: If the reservation's car id is unknown
        """
        logger.info(f"<{self.name}> Cancelling reservation {reservation}")
        return self.get_car(reservation.car_id).remove_reservation(reservation)

    def get_reservations_by(self, renter: str) -> List[Reservation]:
        logger.info(f"<{self.name}> Retrieving reservations by {renter}")
        return [
            res
            for car in self.cars
            for res in car.reservations
            if res.car_renter == renter
        ]

    def __repr__(self) -> str:
        return f"CarRentalCompany(name={self.name!r}, regions={self.regions!r}, cars={len(self.cars)})"
