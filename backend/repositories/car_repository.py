"""
Car repository for fleet and availability queries.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Car as CarModel, CarType as CarTypeModel
from .base_repository import BaseRepository
from .car_specifications import (
    CarsAvailableInPeriodSpec,
    CarsInCompanySpec,
    CarsInRegionSpec,
    CarsOfTypeSpec,
)


class CarRepository(BaseRepository[CarModel]):
    """Repository for Car rows and the car types they reference."""

    def __init__(self, db: Session):
        super().__init__(db, CarModel)

    def get_car_types_in_company(self, company_name: str) -> List[CarTypeModel]:
        """
        Car types of the cars a company owns.

        Args:
            company_name: Company name

        Returns:
            Car type rows ordered by name
        """
        return self.db.query(CarTypeModel).filter(
            CarTypeModel.company_name == company_name,
            CarTypeModel.cars.any()
        ).order_by(CarTypeModel.name).all()

    def get_ids_for_type_in_company(self, company_name: str, car_type_name: str) -> List[int]:
        """Ids of a company's cars of one type."""
        spec = CarsInCompanySpec(company_name) & CarsOfTypeSpec(car_type_name)
        return [car.id for car in self.find(spec)]

    def get_available_cars(
        self,
        start: datetime,
        end: datetime,
        car_type_name: Optional[str] = None,
        company_name: Optional[str] = None
    ) -> List[CarModel]:
        """
        Cars free for the whole of [start, end).

        Args:
            start: Inclusive start
            end: Exclusive end
            car_type_name: Only cars of this type
            company_name: Only cars of this company

        Returns:
            Matching cars ordered by id
        """
        spec = CarsAvailableInPeriodSpec(start, end)
        if car_type_name:
            spec = spec & CarsOfTypeSpec(car_type_name)
        if company_name:
            spec = spec & CarsInCompanySpec(company_name)
        return self.find(spec)

    def get_available_car_types(self, start: datetime, end: datetime) -> List[CarTypeModel]:
        """
        Car types, across companies, with at least one car free in [start, end).

        A type name offered by two companies appears once per company.
        """
        available = CarsAvailableInPeriodSpec(start, end)
        return self.db.query(CarTypeModel).filter(
            CarTypeModel.cars.any(available.to_sql_filter())
        ).order_by(CarTypeModel.name, CarTypeModel.company_name).all()

    def get_cheapest_car_type(self, start: datetime, end: datetime, region: str) -> Optional[CarTypeModel]:
        """
        Cheapest car type with a free car at a company serving the region.

        Ties on price are broken by type name, then company name.

        Returns:
            Car type row or None if nothing is free
        """
        spec = CarsAvailableInPeriodSpec(start, end) & CarsInRegionSpec(region)
        return self.db.query(CarTypeModel).filter(
            CarTypeModel.cars.any(spec.to_sql_filter())
        ).order_by(
            CarTypeModel.rental_price_per_day,
            CarTypeModel.name,
            CarTypeModel.company_name
        ).first()
