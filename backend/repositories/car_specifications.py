"""
Car-specific Specifications

Predicates over fleet rows. Availability uses the half-open overlap test:
a reservation blocks [start, end) when it starts before end and ends after
start.
"""

from datetime import datetime

from models import Car, CarType, CarRentalCompany, CompanyRegion
from .reservation_specifications import ReservationsOverlappingSpec
from .specifications import Specification


class CarsInCompanySpec(Specification[Car]):
    """Cars owned by a company."""

    def __init__(self, company_name: str):
        self.company_name = company_name

    def is_satisfied_by(self, car: Car) -> bool:
        return car.company_name == self.company_name

    def to_sql_filter(self):
        return Car.company_name == self.company_name


class CarsOfTypeSpec(Specification[Car]):
    """Cars of a car type, matched by type name."""

    def __init__(self, car_type_name: str):
        self.car_type_name = car_type_name

    def is_satisfied_by(self, car: Car) -> bool:
        return car.car_type.name == self.car_type_name

    def to_sql_filter(self):
        return Car.car_type.has(CarType.name == self.car_type_name)


class CarsAvailableInPeriodSpec(Specification[Car]):
    """Cars with no reservation intersecting [start, end)."""

    def __init__(self, start: datetime, end: datetime):
        self.overlapping = ReservationsOverlappingSpec(start, end)

    def is_satisfied_by(self, car: Car) -> bool:
        return not any(self.overlapping.is_satisfied_by(res) for res in car.reservations)

    def to_sql_filter(self):
        return ~Car.reservations.any(self.overlapping.to_sql_filter())


class CarsInRegionSpec(Specification[Car]):
    """Cars of companies that serve a region."""

    def __init__(self, region: str):
        self.region = region

    def is_satisfied_by(self, car: Car) -> bool:
        return self.region in car.company.region_names

    def to_sql_filter(self):
        return Car.company.has(
            CarRentalCompany.regions.any(CompanyRegion.region == self.region)
        )
