"""
Domain Aggregates

Aggregates are clusters of domain objects that can be treated as a single unit.
The aggregate root is the only member of the aggregate that outside objects
are allowed to hold references to.

- CarRentalCompany: Groups a company's Cars, their CarTypes and Reservations
"""

from .car_rental_company import CarRentalCompany, calculate_rental_price

__all__ = ["CarRentalCompany", "calculate_rental_price"]
