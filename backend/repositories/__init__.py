"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .company_repository import CompanyRepository
from .car_repository import CarRepository
from .reservation_repository import ReservationRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "CarRepository",
    "ReservationRepository",
]
