"""Photo repository - photo lookups and query construction."""
from typing import Optional

from sqlalchemy import Select, func, select

from ..database import Photo
from .base import Repository


class PhotoRepository(Repository):
    """Repository for photos."""

    def query(self) -> Select:
        """Return a fresh query over all photos."""
        return select(Photo)

    def id_query(self, photo_id: int) -> Select:
        """Return a query for the id of a single photo.

        Selecting the id column only keeps the query free of model hydration.
        """
        return select(Photo.id).where(Photo.id == photo_id)

    def get_by_id(self, photo_id: int) -> Optional[Photo]:
        """Get photo by ID."""
        return self._session.get(Photo, photo_id)

    def fetch_all(self, query: Select) -> list[Photo]:
        """Execute a photo query and return the photos."""
        return self._all(query)

    def count(self, query: Select) -> int:
        """Count rows matched by a photo query."""
        return self._scalar(select(func.count()).select_from(query.subquery())) or 0

    def create(
        self,
        title: str = "",
        owner_id: int = None,
        album_id: int = None,
        public: bool = False
    ) -> Photo:
        """Create a new photo.

        Args:
            title: Photo title
            owner_id: Owner user ID
            album_id: Album ID, None for unsorted photos
            public: Public flag

        Returns:
            Created photo
        """
        photo = Photo(title=title, owner_id=owner_id, album_id=album_id, public=public)
        self._session.add(photo)
        self._commit()
        return photo
