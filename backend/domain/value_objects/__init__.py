"""
Domain Value Objects

Value objects are immutable types compared by their values, not by ID.

- RentalPeriod: Half-open [start, end) interval with overlap and duration logic
- ReservationConstraints: What a renter asks for
- Quote: Priced, non-binding offer
- Reservation: Quote bound to a specific car
"""

from .rental_period import RentalPeriod
from .reservation_constraints import ReservationConstraints
from .quote import Quote
from .reservation import Reservation

__all__ = [
    "RentalPeriod",
    "ReservationConstraints",
    "Quote",
    "Reservation",
]
