"""
RentalPeriod Value Object

Immutable half-open date range used for availability and pricing.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from constants import SECONDS_PER_DAY


@dataclass(frozen=True)
class RentalPeriod:
    """
    Rental window [start, end).

    The start is inclusive and the end exclusive, so a car returned at noon
    can be picked up again at noon. Inverted or empty periods are accepted
    here; callers validate them before building constraints.
    """

    start: datetime
    end: datetime

    def overlaps(self, other: "RentalPeriod") -> bool:
        """Check if the two periods share at least one instant."""
        return self.start < other.end and other.start < self.end

    def overlaps_range(self, start: datetime, end: datetime) -> bool:
        """Same as overlaps() for a bare start/end pair."""
        return self.start < end and start < self.end

    def duration_in_days(self) -> int:
        """
        Length of the period in whole days, partial days rounded up.

        Returns:
            ceil((end - start) / 1 day); 36 hours gives 2
        """
        seconds = (self.end - self.start).total_seconds()
        return math.ceil(seconds / SECONDS_PER_DAY)

    def __str__(self) -> str:
        return f"{self.start:%Y-%m-%d %H:%M} - {self.end:%Y-%m-%d %H:%M}"
