"""
Response DTOs

Serialisable views of car types, quotes and reservations. They read
attributes, so they accept domain objects and ORM rows alike.
"""

from .reservation_response import (
    CarTypeResponse,
    CompanyReportResponse,
    QuoteResponse,
    ReservationResponse,
)

__all__ = [
    "CarTypeResponse",
    "CompanyReportResponse",
    "QuoteResponse",
    "ReservationResponse",
]
