"""
Car Entity

A physical vehicle of a given type. Each car owns the list of reservations
attached to it and answers availability questions from that list alone.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from constants import ReservationFailure
from exceptions import ReservationError
from ..value_objects.reservation import Reservation
from .car_type import CarType

logger = logging.getLogger(__name__)


class Car:
    """Vehicle with identity; equal to another car only when the ids match."""

    def __init__(self, id: int, type: CarType, reservations: Optional[Iterable[Reservation]] = None):
        self.id = id
        self.type = type
        self._reservations: List[Reservation] = list(reservations or [])

    @property
    def reservations(self) -> Tuple[Reservation, ...]:
        """Snapshot of the reservations on this car."""
        return tuple(self._reservations)

    def is_available(self, start: datetime, end: datetime) -> bool:
        """
        Check if no reservation intersects [start, end).

        Args:
            start: Inclusive start of the window
            end: Exclusive end of the window

        Returns:
            True if the car is free for the whole window
        """
        return not any(res.period.overlaps_range(start, end) for res in self._reservations)

    def add_reservation(self, reservation: Reservation) -> None:
        """
        Attach a reservation to this car.

        Raises:
            ReservationError: If it overlaps a reservation already on the car
        """
        if not self.is_available(reservation.start_date, reservation.end_date):
            raise ReservationError(
                ReservationFailure.NO_CAR_AVAILABLE,
                f"Car {self.id} is already reserved between "
                f"{reservation.start_date} and {reservation.end_date}",
                company=reservation.rental_company
            )
        self._reservations.append(reservation)

    def remove_reservation(self, reservation: Reservation) -> bool:
        """
        Detach a reservation.

        Returns:
            True if removed, False if the car did not hold it
        """
        try:
            self._reservations.remove(reservation)
            return True
        except ValueError:
            logger.warning(f"Car {self.id} holds no reservation {reservation!r}")
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Car):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Car(id={self.id}, type={self.type.name!r}, reservations={len(self._reservations)})"
