"""
Reservation Service

A renter's session: collects quotes from rental companies and confirms them
as a group. Company aggregates are loaded from the store for every
operation, so availability is always checked against committed reservations.
"""

import random
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from constants import ReservationFailure
from domain.aggregates.car_rental_company import CarRentalCompany
from domain.entities.car_type import CarType
from domain.value_objects.quote import Quote
from domain.value_objects.reservation import Reservation
from domain.value_objects.reservation_constraints import ReservationConstraints
from dtos.request.reservation_request import ReservationConstraintsRequest
from exceptions import ApplicationError, DatabaseError, ReservationError
from repositories.car_repository import CarRepository
from repositories.company_repository import CompanyRepository
from repositories.reservation_repository import ReservationRepository
from services.booking_locks import company_locks
from services.interfaces import IReservationSession
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


class ReservationService(IReservationSession):
    """Reservation session for one renter."""

    def __init__(self, db: Session, renter: str, rng: Optional[random.Random] = None):
        """
        Initialize ReservationService.

        Args:
            db: Database session
            renter: Name of the renter this session acts for
            rng: Random source for car selection on confirmation
        """
        self.db = db
        self.renter = renter
        self.rng = rng
        self.company_repo = CompanyRepository(db)
        self.car_repo = CarRepository(db)
        self.reservation_repo = ReservationRepository(db)
        self._quotes: List[Quote] = []

    def _load_company(self, company_name: str) -> CarRentalCompany:
        return self.company_repo.load_aggregate(company_name, rng=self.rng)

    def get_all_rental_companies(self) -> List[str]:
        return self.company_repo.get_all_names()

    def get_available_car_types(self, start: datetime, end: datetime) -> List[CarType]:
        """
        Car types with a free car in [start, end) at any company.

        Types with the same name at several companies are reported once.
        """
        car_types = {row.to_domain() for row in self.car_repo.get_available_car_types(start, end)}
        return sorted(car_types, key=lambda t: t.name)

    def get_cheapest_car_type(self, start: datetime, end: datetime, region: str) -> str:
        cheapest = self.car_repo.get_cheapest_car_type(start, end, region)
        if cheapest is None:
            raise ReservationError(
                ReservationFailure.NO_MATCHING_OFFER,
                f"No car available in region {region} from {start} to {end}"
            )
        return cheapest.name

    @log_operation("create_quote")
    def create_quote(
        self,
        company_name: str,
        constraints: Union[ReservationConstraints, ReservationConstraintsRequest]
    ) -> Quote:
        """
        Ask a company for a quote and keep it for confirmation.

        Args:
            company_name: Company to quote at
            constraints: Domain constraints, or a request DTO to convert

        Returns:
            The quote

        Raises:
            ReservationError: If the company cannot satisfy the constraints
            NotFoundError: If the company does not exist
        """
        if isinstance(constraints, ReservationConstraintsRequest):
            constraints = constraints.to_constraints()

        quote = self._load_company(company_name).create_quote(constraints, self.renter)
        self._quotes.append(quote)
        return quote

    def get_current_quotes(self) -> List[Quote]:
        return list(self._quotes)

    @log_operation("confirm_quotes")
    def confirm_quotes(self) -> List[Reservation]:
        """
        Confirm all pending quotes in one transaction.

        If any quote fails nothing is stored, the pending quotes are kept
        and the error propagates. On success the pending quotes are cleared.

        Returns:
            The reservations, with their store ids

        Raises:
            ReservationError: If a quote can no longer be honoured
            DatabaseError: If the transaction cannot be committed
        """
        if not self._quotes:
            return []

        with company_locks(q.rental_company for q in self._quotes):
            companies: Dict[str, CarRentalCompany] = {}
            confirmed: List[Reservation] = []
            try:
                for quote in self._quotes:
                    company = companies.get(quote.rental_company)
                    if company is None:
                        company = self._load_company(quote.rental_company)
                        companies[quote.rental_company] = company

                    reservation = company.confirm_quote(quote)
                    row = self.reservation_repo.add(reservation)
                    confirmed.append(replace(reservation, id=row.id))

                self.db.commit()
            except ApplicationError:
                self.db.rollback()
                raise
            except SQLAlchemyError as e:
                self.db.rollback()
                raise DatabaseError("confirm_quotes", f"Failed to store reservations: {e}") from e

        logger.info(
            f"Confirmed {len(confirmed)} reservation(s)",
            extra={"renter": self.renter}
        )
        self._quotes = []
        return confirmed

    @log_operation("cancel_reservation")
    def cancel_reservation(self, reservation: Reservation) -> None:
        """
        Cancel a reservation, freeing its car for the period.

        A reservation its car does not hold is left in the store untouched.

        Raises:
            NotFoundError: If the company or the reservation's car is unknown
            DatabaseError: If the deletion cannot be committed
        """
        with company_locks([reservation.rental_company]):
            try:
                company = self._load_company(reservation.rental_company)
                if not company.cancel_reservation(reservation):
                    return
                if not self.reservation_repo.remove(reservation):
                    logger.warning(
                        f"No stored reservation matched {reservation!r}",
                        extra={"renter": self.renter}
                    )
                self.db.commit()
            except ApplicationError:
                self.db.rollback()
                raise
            except SQLAlchemyError as e:
                self.db.rollback()
                raise DatabaseError("cancel_reservation", f"Failed to delete reservation: {e}") from e

    def get_reservations(self) -> List[Reservation]:
        return [row.to_domain() for row in self.reservation_repo.get_by_renter(self.renter)]
