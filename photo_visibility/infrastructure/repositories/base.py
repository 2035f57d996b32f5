"""Base repository and utilities.

Repositories wrap a SQLAlchemy session. Services receive repositories,
never sessions.
"""
from typing import Any, Optional

from sqlalchemy import Select, select
from sqlalchemy.orm import Session


class Repository:
    """Base repository class.

    All repositories should inherit from this class.

    Example:
        class UserRepository(Repository):
            def get_by_id(self, user_id: int) -> User | None:
                return self._session.get(User, user_id)
    """

    def __init__(self, session: Session):
        """Initialize repository with a database session.

        Args:
            session: SQLAlchemy session
        """
        self._session = session

    def exists(self, query: Select) -> bool:
        """Run an existence probe for the given query.

        The query is wrapped in ``SELECT EXISTS (...)`` so no rows are
        fetched and no entities are hydrated.

        Args:
            query: Any select statement

        Returns:
            True if the query matches at least one row
        """
        return bool(self._session.scalar(select(query.exists())))

    def _scalar(self, query: Select) -> Optional[Any]:
        """Execute a query and return the first column of the first row."""
        return self._session.scalar(query)

    def _all(self, query: Select) -> list:
        """Execute a query and return all scalars."""
        return list(self._session.scalars(query).all())

    def _commit(self) -> None:
        """Commit current transaction."""
        self._session.commit()


def query_entity(query) -> Optional[Any]:
    """Return the leading mapped entity of a select, or None.

    ``select(Photo)`` and ``select(Photo.id)`` both lead with ``Photo``.
    For ``aliased(Photo)`` the alias itself is returned, not ``Photo``.
    """
    descriptions = getattr(query, "column_descriptions", None)
    if not descriptions:
        return None
    return descriptions[0].get("entity")
