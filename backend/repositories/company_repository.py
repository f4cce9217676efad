"""
Company repository: loading and saving CarRentalCompany aggregates.
"""

import random
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from domain.aggregates.car_rental_company import CarRentalCompany as CompanyAggregate
from exceptions import NotFoundError
from models import Car as CarModel, CarRentalCompany as CompanyModel, CompanyRegion
from .base_repository import BaseRepository


class CompanyRepository(BaseRepository[CompanyModel]):
    """Repository for CarRentalCompany rows, keyed by company name."""

    def __init__(self, db: Session):
        super().__init__(db, CompanyModel, id_attr='name')

    def get_all_names(self) -> List[str]:
        """Names of every registered company, alphabetically."""
        rows = self.db.query(self.model.name).order_by(self.model.name).all()
        return [row.name for row in rows]

    def get_names_serving(self, region: str) -> List[str]:
        """Names of the companies that serve a region."""
        rows = self.db.query(self.model.name).filter(
            self.model.regions.any(CompanyRegion.region == region)
        ).order_by(self.model.name).all()
        return [row.name for row in rows]

    def get_with_fleet(self, name: str) -> Optional[CompanyModel]:
        """
        Get a company with regions, cars, car types and reservations loaded.

        Rows already in the session are refreshed from the database.

        Args:
            name: Company name

        Returns:
            Company row or None if not found
        """
        return self.db.query(self.model).options(
            selectinload(self.model.regions),
            selectinload(self.model.cars).selectinload(CarModel.car_type),
            selectinload(self.model.cars).selectinload(CarModel.reservations),
        ).filter(self.model.name == name).populate_existing().first()

    def load_aggregate(self, name: str, rng: Optional[random.Random] = None) -> CompanyAggregate:
        """
        Build the domain aggregate of a company.

        Args:
            name: Company name
            rng: Random source handed to the aggregate

        Raises:
            NotFoundError: If no company has this name
        """
        row = self.get_with_fleet(name)
        if row is None:
            raise NotFoundError("company", name)
        return row.to_domain(rng=rng)

    def add_aggregate(self, company: CompanyAggregate) -> CompanyModel:
        """
        Persist a new company with its fleet.

        Returns:
            The created company row, with generated car ids flushed
        """
        return self.create(CompanyModel.from_domain(company))
