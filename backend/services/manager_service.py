"""
Manager Service

Fleet registration and reporting for rental company managers. Reporting
figures come straight from repository queries over the stored reservations.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from domain.aggregates.car_rental_company import CarRentalCompany
from domain.entities.car import Car
from domain.entities.car_type import CarType
from dtos.request.reservation_request import CompanyRegistrationRequest
from dtos.response.reservation_response import CarTypeResponse, CompanyReportResponse
from exceptions import DatabaseError, NotFoundError, ValidationError
from models import CarType as CarTypeModel
from repositories.car_repository import CarRepository
from repositories.company_repository import CompanyRepository
from repositories.reservation_repository import ReservationRepository
from services.fleet_loader import build_cars, load_fleet
from services.interfaces import IManagerSession
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class ManagerService(IManagerSession):
    """Service for company registration and reservation statistics."""

    def __init__(self, db: Session):
        """
        Initialize ManagerService.

        Args:
            db: Database session
        """
        self.db = db
        self.company_repo = CompanyRepository(db)
        self.car_repo = CarRepository(db)
        self.reservation_repo = ReservationRepository(db)

    def _require_company(self, company_name: str) -> None:
        if not self.company_repo.exists(company_name):
            raise NotFoundError("company", company_name)

    # Registration

    @log_operation("register_company")
    def register_company(
        self,
        company_name: str,
        regions: Iterable[str],
        cars: Iterable[Car]
    ) -> CarRentalCompany:
        """
        Store a new company with its fleet.

        Args:
            company_name: Company name, must be unused
            regions: Regions the company serves
            cars: Fleet; cars without id get one from the store

        Returns:
            The stored company as an aggregate, with car ids

        Raises:
            ValidationError: If a company with this name exists
            DatabaseError: If the company cannot be stored
        """
        if self.company_repo.exists(company_name):
            raise ValidationError(
                f"Company {company_name} is already registered",
                invalid_fields={"name": company_name}
            )

        company = CarRentalCompany(company_name, regions, cars)
        try:
            self.company_repo.add_aggregate(company)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError("register_company", f"Failed to store company {company_name}: {e}") from e

        logger.info(f"Registered company {company_name} with {len(company.cars)} car(s)")
        return self.company_repo.load_aggregate(company_name)

    def load_company_from_file(
        self,
        path: Union[str, Path],
        company_name: str,
        regions: Iterable[str]
    ) -> CarRentalCompany:
        """Register a company whose fleet is described by a fleet file."""
        return self.register_company(company_name, regions, build_cars(load_fleet(path)))

    def register(self, request: CompanyRegistrationRequest) -> CarRentalCompany:
        """Register a company from a validated registration request."""
        return self.load_company_from_file(request.fleet_file, request.name, request.regions)

    # Fleet queries

    def get_car_types(self, company_name: str) -> List[CarType]:
        """
        Car types in a company's fleet, by name.

        Raises:
            NotFoundError: If the company does not exist
        """
        self._require_company(company_name)
        return [row.to_domain() for row in self.car_repo.get_car_types_in_company(company_name)]

    def get_car_ids(self, company_name: str, car_type: str) -> Set[int]:
        self._require_company(company_name)
        return set(self.car_repo.get_ids_for_type_in_company(company_name, car_type))

    # Reservation statistics

    def get_number_of_reservations(
        self,
        company_name: str,
        car_type: str,
        car_id: Optional[int] = None
    ) -> int:
        """
        Reservations of a car type at a company.

        Args:
            company_name: Company name
            car_type: Car type name
            car_id: Count only the reservations of this car

        Returns:
            Number of reservations
        """
        if car_id is None:
            return self.reservation_repo.count_for_car_type(company_name, car_type)
        return self.reservation_repo.count_for_car(company_name, car_type, car_id)

    def get_number_of_reservations_by(self, renter: str) -> int:
        return self.reservation_repo.count_by_renter(renter)

    def get_best_clients(self) -> Set[str]:
        """
        Renters holding the highest number of reservations.

        Returns:
            Set of renter names, empty when there are no reservations
        """
        best_count = self.reservation_repo.get_best_client_count()
        if best_count == 0:
            return set()
        return self.reservation_repo.get_clients_with_reservation_count(best_count)

    def get_clients_with_reservation_count(self, reservation_count: int) -> Set[str]:
        return self.reservation_repo.get_clients_with_reservation_count(reservation_count)

    def get_most_popular_car_type_in(self, company_name: str, year: int) -> Optional[CarType]:
        """
        Car type of a company with the most reservations starting in a year.

        Returns:
            The car type, or None if the company had no reservations that year

        Raises:
            NotFoundError: If the company does not exist
        """
        self._require_company(company_name)
        type_name = self.reservation_repo.get_most_popular_car_type(company_name, year)
        if type_name is None:
            return None

        row = self.db.query(CarTypeModel).filter(
            CarTypeModel.company_name == company_name,
            CarTypeModel.name == type_name
        ).first()
        if row is None:
            raise NotFoundError("car type", type_name, scope=company_name)
        return row.to_domain()

    def build_company_report(self, company_name: str, year: Optional[int] = None) -> CompanyReportResponse:
        """
        Reservation figures of a company.

        Args:
            company_name: Company name
            year: Year for the popularity figure (defaults to the current year)
        """
        year = year or datetime.now().year
        company = self.company_repo.get_by_id(company_name)
        if company is None:
            raise NotFoundError("company", company_name)

        car_types = self.get_car_types(company_name)
        most_popular = self.get_most_popular_car_type_in(company_name, year)
        return CompanyReportResponse(
            company=company_name,
            regions=company.region_names,
            car_types=[CarTypeResponse.model_validate(t) for t in car_types],
            reservations_per_car_type={
                t.name: self.get_number_of_reservations(company_name, t.name) for t in car_types
            },
            most_popular_car_type=most_popular.name if most_popular else None,
            year=year
        )
