"""
Quote Value Object

Priced offer for a car type at one company. A quote does not hold a car;
confirming it may still fail if the fleet fills up in the meantime.
"""

from dataclasses import dataclass
from datetime import datetime

from .rental_period import RentalPeriod


@dataclass(frozen=True)
class Quote:
    car_renter: str
    start_date: datetime
    end_date: datetime
    rental_company: str
    car_type: str
    rental_price: float

    @property
    def period(self) -> RentalPeriod:
        return RentalPeriod(self.start_date, self.end_date)

    def __str__(self) -> str:
        return (
            f"Quote for {self.car_renter} from {self.start_date} to {self.end_date} "
            f"at {self.rental_company}\nCar type: {self.car_type}\t"
            f"Total price: {self.rental_price:.2f}"
        )
