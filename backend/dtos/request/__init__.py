"""
Request DTOs

Validated input for the rental services. Range and blank-field checks happen
here, so the domain never sees an inverted rental period.
"""

from .reservation_request import CompanyRegistrationRequest, ReservationConstraintsRequest

__all__ = ["CompanyRegistrationRequest", "ReservationConstraintsRequest"]
