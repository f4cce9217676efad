"""
Base repository providing common CRUD operations.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session

from .specifications import Specification

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD and specification queries.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T], id_attr: str = 'id'):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
            id_attr: Name of the primary key attribute
        """
        self.db = db
        self.model = model
        self.id_column = getattr(model, id_attr)

    def create(self, obj: T) -> T:
        """
        Add a new record and flush so generated keys are populated.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Retrieve a record by its primary key.

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.id_column == id).first()

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        Retrieve all records.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
        """
        query = self.db.query(self.model).order_by(self.id_column)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def delete(self, obj: T) -> None:
        self.db.delete(obj)
        self.db.flush()

    def count(self) -> int:
        return self.db.query(self.model).count()

    def exists(self, id: Any) -> bool:
        return self.db.query(self.model).filter(self.id_column == id).count() > 0

    def find(self, spec: Specification[T]) -> List[T]:
        """
        Find records matching a Specification.

        Example:
            spec = ReservationsByRenterSpec('alice') & ReservationsInYearSpec(2024)
            reservations = reservation_repo.find(spec)
        """
        return self.db.query(self.model).filter(spec.to_sql_filter()).order_by(self.id_column).all()

    def find_one(self, spec: Specification[T]) -> Optional[T]:
        """First record matching a Specification, or None."""
        return self.db.query(self.model).filter(spec.to_sql_filter()).order_by(self.id_column).first()

    def count_matching(self, spec: Specification[T]) -> int:
        """Number of records matching a Specification."""
        return self.db.query(self.model).filter(spec.to_sql_filter()).count()
