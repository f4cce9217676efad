"""
Fleet Loader

Reads fleet files and builds company aggregates from them.

File format, one car type per line:
    name:seats:trunkSpace:pricePerDay:smokingAllowed:count
Blank lines and lines starting with '#' are ignored.
"""

import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from constants import FleetFile
from domain.aggregates.car_rental_company import CarRentalCompany
from domain.entities.car import Car
from domain.entities.car_type import CarType
from dtos.internal.fleet_entry import FleetEntry
from exceptions import ValidationError

logger = logging.getLogger(__name__)


def parse_fleet_line(line: str, line_number: int = 0) -> FleetEntry:
    """
    Parse one fleet file line.

    Raises:
        ValidationError: If the line has the wrong field count or bad values
    """
    fields = [field.strip() for field in line.split(FleetFile.SEPARATOR)]
    if len(fields) != FleetFile.FIELD_COUNT:
        raise ValidationError(
            f"Line {line_number}: expected {FleetFile.FIELD_COUNT} fields, got {len(fields)}",
            invalid_fields={"line": line_number}
        )

    name, seats, trunk, price, smoking, count = fields
    try:
        return FleetEntry(
            name=name,
            nb_of_seats=seats,
            trunk_space=trunk,
            rental_price_per_day=price,
            smoking_allowed=smoking,
            count=count
        )
    except PydanticValidationError as e:
        invalid = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
        raise ValidationError(f"Line {line_number}: invalid fleet entry", invalid_fields=invalid) from e


def parse_fleet(lines: Iterable[str]) -> List[FleetEntry]:
    """Parse fleet file content, skipping blanks and comments."""
    entries = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(FleetFile.COMMENT_PREFIX):
            continue
        entries.append(parse_fleet_line(line, line_number))
    return entries


def load_fleet(path: Union[str, Path]) -> List[FleetEntry]:
    """
    Read and parse a fleet file.

    Raises:
        ValidationError: If the file is missing or a line is malformed
    """
    path = Path(path)
    if not path.is_file():
        raise ValidationError(f"Fleet file not found: {path}", invalid_fields={"path": str(path)})

    with path.open(encoding='utf-8') as f:
        entries = parse_fleet(f)

    logger.info(f"Loaded {len(entries)} car type(s) from {path}")
    return entries


def build_cars(entries: Iterable[FleetEntry]) -> List[Car]:
    """
    Create the cars described by fleet entries.

    Cars get no id; the store assigns ids when the company is saved.
    """
    cars = []
    for entry in entries:
        car_type = CarType(
            name=entry.name,
            nb_of_seats=entry.nb_of_seats,
            trunk_space=entry.trunk_space,
            rental_price_per_day=entry.rental_price_per_day,
            smoking_allowed=entry.smoking_allowed
        )
        cars.extend(Car(id=None, type=car_type) for _ in range(entry.count))
    return cars


def build_company(
    name: str,
    regions: Iterable[str],
    path: Union[str, Path],
    rng: Optional[random.Random] = None
) -> CarRentalCompany:
    """Company aggregate with the fleet of a file."""
    return CarRentalCompany(name, regions, build_cars(load_fleet(path)), rng=rng)
