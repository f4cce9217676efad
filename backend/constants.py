"""
Application-wide constants.

This module centralizes the magic strings and numbers used by the domain,
persistence and seeding code.
"""
from enum import Enum


SECONDS_PER_DAY = 24 * 60 * 60


class ReservationFailure(str, Enum):
    """
    Reasons a quote or a confirmation can be refused.

    Carried by ReservationError so callers can react to the cause without
    parsing the message.
    """

    REGION_NOT_SERVED = 'REGION_NOT_SERVED'        # Company does not serve the requested region
    UNKNOWN_CAR_TYPE = 'UNKNOWN_CAR_TYPE'          # No car type with the requested name
    CAR_TYPE_UNAVAILABLE = 'CAR_TYPE_UNAVAILABLE'  # Every car of the type is booked in the window
    NO_CAR_AVAILABLE = 'NO_CAR_AVAILABLE'          # Inventory vanished between quote and confirm
    NO_MATCHING_OFFER = 'NO_MATCHING_OFFER'        # Cross-company search found nothing

    @classmethod
    def get_ui_label(cls, reason: 'ReservationFailure') -> str:
        """Get human-readable label for display"""
        labels = {
            cls.REGION_NOT_SERVED: "Region Not Served",
            cls.UNKNOWN_CAR_TYPE: "Unknown Car Type",
            cls.CAR_TYPE_UNAVAILABLE: "Car Type Unavailable",
            cls.NO_CAR_AVAILABLE: "No Car Available",
            cls.NO_MATCHING_OFFER: "No Matching Offer",
        }
        return labels.get(reason, "Reservation Failed")


class FleetFile:
    """Fleet file format constants"""

    SEPARATOR = ":"
    COMMENT_PREFIX = "#"
    FIELD_COUNT = 6  # name:seats:trunk:price:smoking:count
    SUFFIX = ".csv"


class SeedCompanies:
    """Companies created by init_db when the database is empty"""

    # company name -> (fleet file name, regions served)
    DEFAULTS = {
        "Hertz": ("hertz.csv", ["Brussels", "Leuven", "Antwerp"]),
        "Dockx": ("dockx.csv", ["Brussels", "Ghent"]),
    }
