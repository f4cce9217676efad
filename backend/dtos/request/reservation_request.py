"""
Reservation Request DTOs

DTOs for reservation and company registration requests.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from domain.value_objects.reservation_constraints import ReservationConstraints


class ReservationConstraintsRequest(BaseModel):
    """
    Request DTO for a quote.

    Rejects empty and inverted periods before they reach a company.
    """

    start_date: datetime = Field(description="Inclusive start of the rental")
    end_date: datetime = Field(description="Exclusive end of the rental")
    car_type: str = Field(description="Requested car type name")
    region: str = Field(description="Region the car is picked up in")

    @field_validator("car_type", "region")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Strip whitespace and refuse blank values."""
        v = v.strip()
        if not v:
            raise ValueError("Value must not be blank")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        """Store times as naive UTC; aware inputs are converted."""
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @field_validator("end_date")
    @classmethod
    def validate_period(cls, v: datetime, info: ValidationInfo) -> datetime:
        """Ensure the rental ends after it starts."""
        start = info.data.get("start_date")
        if start is not None and v <= start:
            raise ValueError("End date must be after start date")
        return v

    def to_constraints(self) -> ReservationConstraints:
        return ReservationConstraints(
            start_date=self.start_date,
            end_date=self.end_date,
            car_type=self.car_type,
            region=self.region
        )

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "start_date": "2024-03-10T09:00:00",
                "end_date": "2024-03-12T09:00:00",
                "car_type": "Compact",
                "region": "Brussels"
            }
        }


class CompanyRegistrationRequest(BaseModel):
    """Request DTO for registering a company from a fleet file."""

    name: str = Field(description="Company name")
    regions: List[str] = Field(description="Regions the company serves")
    fleet_file: str = Field(description="Path of the fleet file")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Company name must not be blank")
        return v

    @field_validator("regions")
    @classmethod
    def validate_regions(cls, v: List[str]) -> List[str]:
        """Drop blanks and duplicates, keep order; at least one region is required."""
        regions = []
        for region in (r.strip() for r in v):
            if region and region not in regions:
                regions.append(region)
        if not regions:
            raise ValueError("At least one region is required")
        return regions
