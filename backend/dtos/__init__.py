"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple callers and scripts from the domain
objects and database models.

Structure:
- request/: Validated input for the rental services
- response/: Serialisable views of car types, quotes and reservations
- internal/: Parsed records passed between loaders and services
"""
