"""
Reservation repository for bookkeeping and reporting queries.
"""

from typing import Dict, List, Optional, Set

from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.value_objects.reservation import Reservation
from models import Reservation as ReservationModel
from .base_repository import BaseRepository
from .reservation_specifications import (
    ReservationMatchingSpec,
    ReservationsByRenterSpec,
    ReservationsForCarSpec,
    ReservationsForCarTypeSpec,
    ReservationsForCompanySpec,
    ReservationsInYearSpec,
)


class ReservationRepository(BaseRepository[ReservationModel]):
    """Repository for Reservation rows."""

    def __init__(self, db: Session):
        super().__init__(db, ReservationModel)

    def add(self, reservation: Reservation) -> ReservationModel:
        """
        Store a confirmed domain reservation.

        Returns:
            The new row, with its id assigned
        """
        return self.create(ReservationModel.from_domain(reservation))

    def find_stored(self, reservation: Reservation) -> Optional[ReservationModel]:
        """
        Row of a domain reservation.

        Matched on car, renter and period (unique per car since reservations
        never overlap). When the reservation carries an id, the row with that
        id is returned only if it matches as well.
        """
        spec = ReservationMatchingSpec(
            reservation.car_id,
            reservation.car_renter,
            reservation.start_date,
            reservation.end_date
        )
        if reservation.id is not None:
            row = self.get_by_id(reservation.id)
            return row if row is not None and spec.is_satisfied_by(row) else None
        return self.find_one(spec)

    def remove(self, reservation: Reservation) -> bool:
        """
        Delete the row of a domain reservation.

        Returns:
            True if deleted, False if no row matched
        """
        row = self.find_stored(reservation)
        if row is None:
            return False
        self.delete(row)
        return True

    def get_by_renter(self, renter: str) -> List[ReservationModel]:
        return self.find(ReservationsByRenterSpec(renter))

    def count_by_renter(self, renter: str) -> int:
        return self.count_matching(ReservationsByRenterSpec(renter))

    def count_for_car_type(self, company_name: str, car_type_name: str) -> int:
        """Number of reservations of a car type at a company."""
        spec = ReservationsForCompanySpec(company_name) & ReservationsForCarTypeSpec(car_type_name)
        return self.count_matching(spec)

    def count_for_car(self, company_name: str, car_type_name: str, car_id: int) -> int:
        """Number of reservations on one car of a company, checked against its type."""
        spec = (
            ReservationsForCompanySpec(company_name)
            & ReservationsForCarTypeSpec(car_type_name)
            & ReservationsForCarSpec(car_id)
        )
        return self.count_matching(spec)

    def get_renter_counts(self) -> Dict[str, int]:
        """
        Reservation count per renter.

        Returns:
            Mapping of renter name to number of reservations
        """
        rows = self.db.query(
            self.model.car_renter,
            func.count(self.model.id).label('reservation_count')
        ).group_by(self.model.car_renter).all()
        return {row.car_renter: row.reservation_count for row in rows}

    def get_best_client_count(self) -> int:
        """Highest number of reservations held by one renter (0 if none)."""
        counts = self.get_renter_counts()
        return max(counts.values(), default=0)

    def get_clients_with_reservation_count(self, reservation_count: int) -> Set[str]:
        """Renters holding exactly reservation_count reservations."""
        rows = self.db.query(self.model.car_renter).group_by(
            self.model.car_renter
        ).having(func.count(self.model.id) == reservation_count).all()
        return {row.car_renter for row in rows}

    def get_most_popular_car_type(self, company_name: str, year: int) -> Optional[str]:
        """
        Car type name with the most reservations starting in a year.

        Ties are broken alphabetically.

        Returns:
            Car type name, or None if the company had no reservations that year
        """
        reservation_count = func.count(self.model.id)
        spec = ReservationsForCompanySpec(company_name) & ReservationsInYearSpec(year)
        row = self.db.query(
            self.model.car_type,
            reservation_count.label('reservation_count')
        ).filter(
            spec.to_sql_filter()
        ).group_by(
            self.model.car_type
        ).order_by(
            reservation_count.desc(),
            self.model.car_type
        ).first()
        return row.car_type if row else None
