"""Photo service - photo lookups restricted to what the actor may see."""
from typing import Optional

from fastapi import HTTPException

from ...infrastructure.database import Photo
from ...infrastructure.repositories import PhotoRepository
from .photo_authorisation import PhotoAuthorisationService


class PhotoService:
    """Service for reading photos on behalf of an actor.

    Responsibilities:
    - List and count visible photos
    - Fetch a single photo with access check
    - Answer "may I see this photo?" without loading it
    """

    def __init__(
        self,
        photo_repository: PhotoRepository,
        photo_authorisation: PhotoAuthorisationService
    ):
        self.photo_repo = photo_repository
        self.auth = photo_authorisation

    def list_visible(self, album_id: Optional[int] = None, limit: Optional[int] = None) -> list[Photo]:
        """List visible photos, optionally limited to one album.

        Args:
            album_id: Only photos of this album
            limit: Maximum number of photos

        Returns:
            Photos ordered by ID
        """
        query = self.photo_repo.query()
        if album_id is not None:
            query = query.where(Photo.album_id == album_id)
        query = self.auth.apply_visibility_filter(query).order_by(Photo.id)
        if limit is not None:
            query = query.limit(limit)
        return self.photo_repo.fetch_all(query)

    def count_visible(self, album_id: Optional[int] = None) -> int:
        """Count visible photos, optionally limited to one album."""
        query = self.photo_repo.query()
        if album_id is not None:
            query = query.where(Photo.album_id == album_id)
        return self.photo_repo.count(self.auth.apply_visibility_filter(query))

    def can_view(self, photo_id: int) -> bool:
        """Check photo visibility by ID without loading the photo."""
        return self.auth.is_visible(photo_id)

    def get_photo(self, photo_id: int) -> Photo:
        """Get a photo the actor may see.

        Args:
            photo_id: Photo ID

        Returns:
            Photo model

        Raises:
            HTTPException: 404 if the photo doesn't exist, 403 if it is not visible
        """
        photo = self.photo_repo.get_by_id(photo_id)
        if not photo:
            raise HTTPException(status_code=404, detail="Photo not found")

        if not self.auth.is_visible(photo):
            raise HTTPException(status_code=403, detail="Access denied")

        return photo
