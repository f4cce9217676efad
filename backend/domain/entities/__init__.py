"""
Domain Entities

Entities are business objects with identity and lifecycle.

- CarType: a class of car, identified by its name
- Car: a physical vehicle owning its reservations
"""

from .car_type import CarType
from .car import Car

__all__ = ["CarType", "Car"]
