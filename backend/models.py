from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime, ForeignKey, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import random
from typing import Optional

from database import Base
from domain.aggregates.car_rental_company import CarRentalCompany as CompanyAggregate
from domain.entities.car import Car as CarEntity
from domain.entities.car_type import CarType as CarTypeEntity
from domain.value_objects.reservation import Reservation as ReservationValue


class CarRentalCompany(Base):
    __tablename__ = 'companies'

    name = Column(String, primary_key=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    regions = relationship(
        "CompanyRegion", back_populates="company",
        cascade="all, delete-orphan", order_by="CompanyRegion.id"
    )
    car_types = relationship(
        "CarType", back_populates="company",
        cascade="all, delete-orphan", order_by="CarType.name"
    )
    cars = relationship(
        "Car", back_populates="company",
        cascade="all, delete-orphan", order_by="Car.id"
    )

    __table_args__ = (
        CheckConstraint("name != ''"),
    )

    @property
    def region_names(self):
        return [r.region for r in self.regions]

    def to_domain(self, rng: Optional[random.Random] = None) -> CompanyAggregate:
        """Build the aggregate with every car and its reservations."""
        return CompanyAggregate(
            name=self.name,
            regions=self.region_names,
            cars=[car.to_domain() for car in self.cars],
            rng=rng
        )

    @classmethod
    def from_domain(cls, company: CompanyAggregate) -> "CarRentalCompany":
        """
        Create rows for a new company, its regions, car types and cars.

        Car ids of the aggregate are kept when set, otherwise the database
        assigns them.
        """
        row = cls(name=company.name)
        row.regions = [CompanyRegion(region=region) for region in company.regions]

        types_by_name = {}
        for car_type in sorted(company.car_types, key=lambda t: t.name):
            type_row = CarType.from_domain(car_type)
            types_by_name[car_type.name] = type_row
            row.car_types.append(type_row)

        for car in company.cars:
            car_row = Car(id=car.id, car_type=types_by_name[car.type.name])
            car_row.reservations = [Reservation.from_domain(res) for res in car.reservations]
            row.cars.append(car_row)
        return row


class CompanyRegion(Base):
    __tablename__ = 'company_regions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String, ForeignKey('companies.name', ondelete='CASCADE'), nullable=False)
    region = Column(String, nullable=False)

    company = relationship("CarRentalCompany", back_populates="regions")

    __table_args__ = (
        UniqueConstraint('company_name', 'region', name='uq_company_region'),
        Index('idx_regions_region', 'region'),
    )


class CarType(Base):
    __tablename__ = 'car_types'

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String, ForeignKey('companies.name', ondelete='CASCADE'), nullable=False)
    name = Column(String, nullable=False)
    nb_of_seats = Column(Integer, nullable=False)
    smoking_allowed = Column(Boolean, nullable=False, default=False)
    rental_price_per_day = Column(Float, nullable=False)
    trunk_space = Column(Float, nullable=False)  # litres

    company = relationship("CarRentalCompany", back_populates="car_types")
    cars = relationship("Car", back_populates="car_type")

    __table_args__ = (
        CheckConstraint("name != ''"),
        CheckConstraint("rental_price_per_day >= 0"),
        UniqueConstraint('company_name', 'name', name='uq_company_car_type'),
        Index('idx_car_types_price', 'rental_price_per_day'),
    )

    def to_domain(self) -> CarTypeEntity:
        return CarTypeEntity(
            name=self.name,
            nb_of_seats=self.nb_of_seats,
            trunk_space=self.trunk_space,
            rental_price_per_day=self.rental_price_per_day,
            smoking_allowed=self.smoking_allowed,
            id=self.id
        )

    @classmethod
    def from_domain(cls, car_type: CarTypeEntity) -> "CarType":
        return cls(
            id=car_type.id,
            name=car_type.name,
            nb_of_seats=car_type.nb_of_seats,
            trunk_space=car_type.trunk_space,
            rental_price_per_day=car_type.rental_price_per_day,
            smoking_allowed=car_type.smoking_allowed
        )


class Car(Base):
    __tablename__ = 'cars'

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String, ForeignKey('companies.name', ondelete='CASCADE'), nullable=False)
    car_type_id = Column(Integer, ForeignKey('car_types.id'), nullable=False)

    company = relationship("CarRentalCompany", back_populates="cars")
    car_type = relationship("CarType", back_populates="cars")
    reservations = relationship(
        "Reservation", back_populates="car",
        cascade="all, delete-orphan", order_by="Reservation.start_date"
    )

    __table_args__ = (
        Index('idx_cars_company_type', 'company_name', 'car_type_id'),
    )

    def to_domain(self) -> CarEntity:
        return CarEntity(
            id=self.id,
            type=self.car_type.to_domain(),
            reservations=[res.to_domain() for res in self.reservations]
        )


class Reservation(Base):
    """
    A confirmed booking of one car.

    rental_company and car_type are stored by name, as on the quote, so
    reporting queries need no joins for them.
    """
    __tablename__ = 'reservations'

    id = Column(Integer, primary_key=True, autoincrement=True)
    car_id = Column(Integer, ForeignKey('cars.id', ondelete='CASCADE'), nullable=False)
    car_renter = Column(String, nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    rental_company = Column(String, nullable=False)
    car_type = Column(String, nullable=False)
    rental_price = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    car = relationship("Car", back_populates="reservations")

    __table_args__ = (
        CheckConstraint("end_date > start_date"),
        Index('idx_reservations_renter', 'car_renter'),
        Index('idx_reservations_car_period', 'car_id', 'start_date', 'end_date'),
        Index('idx_reservations_company', 'rental_company', 'car_type'),
    )

    def to_domain(self) -> ReservationValue:
        return ReservationValue(
            car_renter=self.car_renter,
            start_date=self.start_date,
            end_date=self.end_date,
            rental_company=self.rental_company,
            car_type=self.car_type,
            rental_price=self.rental_price,
            car_id=self.car_id,
            id=self.id
        )

    @classmethod
    def from_domain(cls, reservation: ReservationValue) -> "Reservation":
        return cls(
            id=reservation.id,
            car_id=reservation.car_id,
            car_renter=reservation.car_renter,
            start_date=reservation.start_date,
            end_date=reservation.end_date,
            rental_company=reservation.rental_company,
            car_type=reservation.car_type,
            rental_price=reservation.rental_price
        )
