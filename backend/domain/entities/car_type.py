"""
CarType Entity

A class of car offered by a company. Two car types are the same type when
they carry the same name, whatever their other attributes.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CarType:
    name: str
    nb_of_seats: int = field(compare=False)
    trunk_space: float = field(compare=False)  # litres
    rental_price_per_day: float = field(compare=False)
    smoking_allowed: bool = field(compare=False)
    id: Optional[int] = field(default=None, compare=False)

    def __str__(self) -> str:
        return (
            f"Car type: {self.name} \t[seats: {self.nb_of_seats}, "
            f"price: {self.rental_price_per_day:.2f}, smoking: {str(self.smoking_allowed).lower()}, "
            f"trunk: {self.trunk_space:.0f}l]"
        )
