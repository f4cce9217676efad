"""
Reservation Value Object

A confirmed quote bound to one car. Immutable once created.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .quote import Quote
from .rental_period import RentalPeriod


@dataclass(frozen=True)
class Reservation:
    """
    Binding allocation of a car to a renter for a period.

    The store id is assigned on persistence and ignored by equality, so a
    freshly confirmed reservation equals the row it was saved as.
    """

    car_renter: str
    start_date: datetime
    end_date: datetime
    rental_company: str
    car_type: str
    rental_price: float
    car_id: int
    id: Optional[int] = field(default=None, compare=False)

    @classmethod
    def from_quote(cls, quote: Quote, car_id: int) -> "Reservation":
        """Bind a quote to the chosen car."""
        return cls(
            car_renter=quote.car_renter,
            start_date=quote.start_date,
            end_date=quote.end_date,
            rental_company=quote.rental_company,
            car_type=quote.car_type,
            rental_price=quote.rental_price,
            car_id=car_id,
        )

    @property
    def period(self) -> RentalPeriod:
        return RentalPeriod(self.start_date, self.end_date)

    def __str__(self) -> str:
        return (
            f"Reservation for {self.car_renter} from {self.start_date} to {self.end_date} "
            f"at {self.rental_company}\nCar type: {self.car_type}\tCar: {self.car_id}\t"
            f"Total price: {self.rental_price:.2f}"
        )
