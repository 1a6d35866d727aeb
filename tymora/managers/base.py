"""Base manager class with common patterns."""

from sqlalchemy.orm import Session


class BaseManager:
    """Base class for all managers.

    Provides common patterns:
    - Database session access
    """

    def __init__(self, db: Session) -> None:
        """Initialize manager with a database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
