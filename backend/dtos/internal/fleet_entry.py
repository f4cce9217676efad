"""
Fleet Entry DTO

One parsed line of a fleet file.
"""

from pydantic import BaseModel, Field, field_validator


class FleetEntry(BaseModel):
    """A car type and how many cars of it a company owns."""

    name: str = Field(description="Car type name")
    nb_of_seats: int = Field(ge=1, description="Number of seats")
    trunk_space: float = Field(ge=0, description="Trunk space in litres")
    rental_price_per_day: float = Field(ge=0, description="Daily rental price")
    smoking_allowed: bool = Field(description="Whether smoking is allowed")
    count: int = Field(ge=0, description="Number of cars of this type")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Car type name must not be blank")
        return v
