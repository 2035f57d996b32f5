"""Photo authorisation - decides which photos an actor may see.

A photo is visible if any of the following holds:

- the actor is an admin
- the actor owns the photo
- the photo is part of an album the actor may access
  (see ``AlbumAuthorisationService``)
- the photo is unsorted (not part of any album) and the actor has
  the upload right
- the photo is public and public photos are not hidden by config

The rules exist twice: as a query filter (``apply_visibility_filter``)
and as an in-memory check on a loaded photo (``is_visible``). Both must
stay in sync.
"""
import logging

from sqlalchemy import Select, inspect, or_, select

from ...config import PUBLIC_PHOTOS_HIDDEN_DEFAULT, PUBLIC_PHOTOS_HIDDEN_KEY
from ...infrastructure.database import Album, Photo
from ...infrastructure.repositories import query_entity
from ..context import ActorContext
from ..contracts import AlbumAccessibilityPolicy, ConfigLookup, PhotoQuerySource
from ..errors import InvalidQueryError
from ..references import disassemble_photo

logger = logging.getLogger(__name__)


class PhotoAuthorisationService:
    """Photo visibility for one actor.

    Responsibilities:
    - Restrict photo queries to visible photos
    - Check visibility of a single photo with as little DB work as possible
    """

    def __init__(
        self,
        actor: ActorContext,
        config: ConfigLookup,
        album_policy: AlbumAccessibilityPolicy,
        photo_repository: PhotoQuerySource
    ):
        self.actor = actor
        self.config = config
        self.album_policy = album_policy
        self.photo_repo = photo_repository

    def apply_visibility_filter(self, query: Select) -> Select:
        """Restrict a photo query to visible photos.

        All conditions go into one OR group which ``where()`` ANDs onto
        the query, so OR clauses the caller already attached keep their
        meaning.

        Args:
            query: Select over ``Photo`` (whole model or its columns).
                An ``aliased(Photo)`` is refused: the conditions name the
                photos table and would not correlate with the alias

        Returns:
            The same query for admins, otherwise the filtered query

        Raises:
            InvalidQueryError: If the query does not select photos
        """
        self._fail_for_wrong_query_model(query)

        if self.actor.is_admin:
            return query

        conditions = []
        if self.actor.is_authenticated:
            conditions.append(Photo.owner_id == self.actor.user_id)
        conditions.append(self._album_accessible_condition())
        if self.actor.can_upload:
            conditions.append(Photo.album_id.is_(None))
        if not self._public_photos_hidden():
            conditions.append(Photo.public.is_(True))

        return query.where(or_(*conditions))

    def is_visible(self, photo_or_id) -> bool:
        """Check whether the actor may see a photo.

        If a loaded ``Photo`` is passed, the DB is not queried for the
        photo at all. If an ID is passed, a single EXISTS query built
        from ``apply_visibility_filter`` runs and no ``Photo`` is
        hydrated.

        Tips for usage:
        - If you already have a ``Photo``, pass it.
        - If you need the ``Photo`` later anyway, fetch it first and pass it.
        - Otherwise pass the ID.

        Args:
            photo_or_id: Photo model, ``ById``/``ByEntity`` reference or photo ID

        Returns:
            True if the photo is visible
        """
        if self.actor.is_admin:
            return True

        photo_id, photo = disassemble_photo(photo_or_id)

        if photo is not None:
            visible = self._is_visible_model(photo)
        else:
            query = self.apply_visibility_filter(self.photo_repo.id_query(photo_id))
            visible = self.photo_repo.exists(query)

        logger.debug("Photo %s visible to user %s: %s", photo_id, self.actor.user_id, visible)
        return visible

    def _is_visible_model(self, photo: Photo) -> bool:
        # Must match apply_visibility_filter.
        album = self._album_reference(photo)

        if not self.actor.is_authenticated:
            return self._is_public_visible(photo) or self._is_album_accessible(album)

        return (
            self.actor.is_current_user(photo.owner_id)
            or (self.actor.can_upload and album is None)
            or self._is_public_visible(photo)
            or self._is_album_accessible(album)
        )

    def _album_reference(self, photo: Photo):
        """Loaded album (model or None) if available, else the raw album ID."""
        if "album" in inspect(photo).unloaded:
            return photo.album_id
        return photo.album

    def _is_album_accessible(self, album) -> bool:
        # An unsorted photo has no album to grant access
        return album is not None and self.album_policy.is_accessible(album)

    def _is_public_visible(self, photo: Photo) -> bool:
        return bool(photo.public) and not self._public_photos_hidden()

    def _album_accessible_condition(self):
        albums = self.album_policy.apply_accessibility_filter(select(Album.id))
        return albums.where(Album.id == Photo.album_id).correlate(Photo).exists()

    def _public_photos_hidden(self) -> bool:
        return self.config.get_bool(PUBLIC_PHOTOS_HIDDEN_KEY, PUBLIC_PHOTOS_HIDDEN_DEFAULT)

    def _fail_for_wrong_query_model(self, query) -> None:
        if query_entity(query) is not Photo:
            logger.warning("Refusing to apply photo filter to %r", query)
            raise InvalidQueryError("the given query does not query for photos")
