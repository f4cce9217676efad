"""
Domain Layer

This package contains the rental bookkeeping logic, separated from
persistence concerns and infrastructure. Nothing in here imports SQLAlchemy.

Structure:
- entities/: CarType and Car, objects with identity
- value_objects/: Immutable rental periods, constraints, quotes and reservations
- aggregates/: CarRentalCompany, the consistency boundary for its fleet
"""
