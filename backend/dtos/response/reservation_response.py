"""
Reservation Response DTOs
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CarTypeResponse(BaseModel):
    """Response DTO for a car type."""

    name: str = Field(description="Car type name")
    nb_of_seats: int = Field(description="Number of seats")
    trunk_space: float = Field(description="Trunk space in litres")
    rental_price_per_day: float = Field(description="Daily rental price")
    smoking_allowed: bool = Field(description="Whether smoking is allowed")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class QuoteResponse(BaseModel):
    """Response DTO for a quote."""

    car_renter: str
    start_date: datetime
    end_date: datetime
    rental_company: str
    car_type: str
    rental_price: float

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class ReservationResponse(QuoteResponse):
    """Response DTO for a reservation: a quote plus the car it is bound to."""

    car_id: int = Field(description="Reserved car")
    id: Optional[int] = Field(None, description="Store id, once persisted")


class CompanyReportResponse(BaseModel):
    """
    Response DTO for the manager report of one company.

    Aggregated reservation figures per car type.
    """

    company: str = Field(description="Company name")
    regions: List[str] = Field(description="Regions served")
    car_types: List[CarTypeResponse] = Field(description="Car types in the fleet")
    reservations_per_car_type: Dict[str, int] = Field(description="Reservation count per car type")
    most_popular_car_type: Optional[str] = Field(None, description="Most reserved car type in the report year")
    year: int = Field(description="Year used for the popularity figure")
