"""Album authorisation - decides which albums an actor may access.

An album is accessible if any of the following holds:

- the actor is an admin
- the actor owns the album
- the album is shared with the actor
- the album is public and either has no password or was unlocked
  in the actor's session
"""
import logging
from typing import Union

from sqlalchemy import Select, and_, inspect, or_

from ...infrastructure.database import Album, User
from ...infrastructure.repositories import AlbumRepository, query_entity
from ..context import ActorContext
from ..errors import InvalidQueryError

logger = logging.getLogger(__name__)


class AlbumAuthorisationService:
    """Album accessibility checks for one actor.

    Like the photo checks, accessibility is available both as a query
    filter and as a single-album check; both apply the same rules.
    """

    def __init__(self, actor: ActorContext, album_repository: AlbumRepository):
        self.actor = actor
        self.album_repo = album_repository

    def apply_accessibility_filter(self, query: Select) -> Select:
        """Restrict an album query to albums the actor may access.

        Args:
            query: Select over ``Album``; an ``aliased(Album)`` does not
                qualify since the conditions name the albums table itself

        Returns:
            The same query for admins, otherwise the query with one
            additional OR group

        Raises:
            InvalidQueryError: If the query does not select albums
        """
        self._fail_for_wrong_query_model(query)

        if self.actor.is_admin:
            return query

        if not self.actor.is_authenticated:
            return query.where(self._public_condition())

        user_id = self.actor.user_id
        return query.where(
            or_(
                Album.owner_id == user_id,
                Album.shared_with.any(User.id == user_id),
                self._public_condition(),
            )
        )

    def is_accessible(self, album: Union[Album, int, str, None]) -> bool:
        """Check whether the actor may access an album.

        A loaded ``Album`` is checked in memory. For an album ID a single
        EXISTS query is issued; no model is hydrated.

        Args:
            album: Album model, album ID, or None (no album)

        Returns:
            True if the album is accessible
        """
        if album is None:
            return False

        if self.actor.is_admin:
            return True

        if isinstance(album, Album):
            return self._is_accessible_model(album)

        query = self.apply_accessibility_filter(self.album_repo.id_query(album))
        return self.album_repo.exists(query)

    def _is_accessible_model(self, album: Album) -> bool:
        if album.public and (not album.password or album.id in self.actor.unlocked_album_ids):
            return True

        if not self.actor.is_authenticated:
            return False

        if self.actor.is_current_user(album.owner_id):
            return True

        # Avoid a lazy load if the share list was not fetched with the album
        if "shared_with" in inspect(album).unloaded:
            return self.album_repo.is_shared_with(album.id, self.actor.user_id)
        return any(user.id == self.actor.user_id for user in album.shared_with)

    def _public_condition(self):
        unprotected = or_(Album.password.is_(None), Album.password == "")
        if self.actor.unlocked_album_ids:
            unprotected = or_(unprotected, Album.id.in_(sorted(self.actor.unlocked_album_ids)))
        return and_(Album.public.is_(True), unprotected)

    def _fail_for_wrong_query_model(self, query) -> None:
        if query_entity(query) is not Album:
            logger.warning("Refusing to apply album filter to %r", query)
            raise InvalidQueryError("the given query does not query for albums")

