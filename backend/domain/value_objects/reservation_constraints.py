"""
ReservationConstraints Value Object

What a renter asks a company for: a car type in a region for a period.
"""

from dataclasses import dataclass
from datetime import datetime

from .rental_period import RentalPeriod


@dataclass(frozen=True)
class ReservationConstraints:
    start_date: datetime
    end_date: datetime
    car_type: str
    region: str

    @property
    def period(self) -> RentalPeriod:
        return RentalPeriod(self.start_date, self.end_date)

    def __str__(self) -> str:
        return (
            f"Reservation constraints [from {self.start_date} until {self.end_date}, "
            f"car type: {self.car_type}, region: {self.region}]"
        )
