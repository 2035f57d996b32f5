"""Album repository - album lookups, sharing and query construction."""
from typing import Optional

from sqlalchemy import Select, select

from ..database import Album, User, album_shares
from .base import Repository


class AlbumRepository(Repository):
    """Repository for albums and the album_shares junction table."""

    def query(self) -> Select:
        """Return a fresh query over all albums."""
        return select(Album)

    def id_query(self, album_id: int) -> Select:
        """Return a query for the id of a single album."""
        return select(Album.id).where(Album.id == album_id)

    def get_by_id(self, album_id: int) -> Optional[Album]:
        """Get album by ID."""
        return self._session.get(Album, album_id)

    def fetch_all(self, query: Select) -> list[Album]:
        """Execute an album query and return the albums."""
        return self._all(query)

    def is_shared_with(self, album_id: int, user_id: int) -> bool:
        """Check whether an album is shared with a user."""
        return self.exists(
            select(album_shares.c.album_id)
            .where(album_shares.c.album_id == album_id)
            .where(album_shares.c.user_id == user_id)
        )

    def create(
        self,
        title: str,
        owner_id: int,
        public: bool = False,
        password: str = None
    ) -> Album:
        """Create a new album.

        Args:
            title: Album title
            owner_id: Owner user ID
            public: Public flag
            password: Optional password guarding a public album

        Returns:
            Created album
        """
        album = Album(title=title, owner_id=owner_id, public=public, password=password)
        self._session.add(album)
        self._commit()
        return album

    def share(self, album_id: int, user_id: int) -> bool:
        """Share album with a user.

        Returns:
            True if the share was added, False if album or user is missing
        """
        album = self.get_by_id(album_id)
        user = self._session.get(User, user_id)
        if album is None or user is None:
            return False
        if user not in album.shared_with:
            album.shared_with.append(user)
            self._commit()
        return True
