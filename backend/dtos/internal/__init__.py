"""
Internal DTOs

Records passed between loaders and services within the backend.
"""

from .fleet_entry import FleetEntry

__all__ = ["FleetEntry"]
