"""
Service Interfaces

Abstract base classes for the service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Set

from domain.entities.car_type import CarType
from domain.value_objects.quote import Quote
from domain.value_objects.reservation import Reservation
from domain.value_objects.reservation_constraints import ReservationConstraints


class IReservationSession(ABC):
    """
    Interface for a renter's reservation session.

    A session collects quotes from one or more companies and confirms them
    together.
    """

    @abstractmethod
    def get_all_rental_companies(self) -> List[str]:
        """Names of all rental companies."""
        pass

    @abstractmethod
    def get_available_car_types(self, start: datetime, end: datetime) -> List[CarType]:
        """Car types with at least one free car in [start, end), at any company."""
        pass

    @abstractmethod
    def get_cheapest_car_type(self, start: datetime, end: datetime, region: str) -> str:
        """
        Name of the cheapest car type available in a region.

        Raises:
            ReservationError: If nothing is available
        """
        pass

    @abstractmethod
    def create_quote(self, company_name: str, constraints: ReservationConstraints) -> Quote:
        """
        Ask a company for a quote and keep it in the session.

        Raises:
            ReservationError: If the company cannot satisfy the constraints
            NotFoundError: If the company does not exist
        """
        pass

    @abstractmethod
    def get_current_quotes(self) -> List[Quote]:
        """Quotes waiting for confirmation."""
        pass

    @abstractmethod
    def confirm_quotes(self) -> List[Reservation]:
        """
        Confirm every pending quote, or none of them.

        Raises:
            ReservationError: If any quote can no longer be honoured
        """
        pass

    @abstractmethod
    def cancel_reservation(self, reservation: Reservation) -> None:
        """
        Cancel a confirmed reservation.

        Raises:
            NotFoundError: If the company or the reservation's car is unknown
        """
        pass

    @abstractmethod
    def get_reservations(self) -> List[Reservation]:
        """This renter's reservations across all companies."""
        pass


class IManagerSession(ABC):
    """
    Interface for fleet management and reporting.
    """

    @abstractmethod
    def get_car_types(self, company_name: str) -> List[CarType]:
        """Car types in a company's fleet."""
        pass

    @abstractmethod
    def get_car_ids(self, company_name: str, car_type: str) -> Set[int]:
        """Ids of a company's cars of one type."""
        pass

    @abstractmethod
    def get_number_of_reservations(
        self,
        company_name: str,
        car_type: str,
        car_id: Optional[int] = None
    ) -> int:
        """Reservations of a car type at a company, optionally for one car."""
        pass

    @abstractmethod
    def get_number_of_reservations_by(self, renter: str) -> int:
        """Reservations held by a renter."""
        pass

    @abstractmethod
    def get_best_clients(self) -> Set[str]:
        """Renters with the most reservations."""
        pass

    @abstractmethod
    def get_most_popular_car_type_in(self, company_name: str, year: int) -> Optional[CarType]:
        """Most reserved car type of a company in a year."""
        pass
