"""Application services - business logic layer."""

from .album_authorisation import AlbumAuthorisationService
from .photo_authorisation import PhotoAuthorisationService
from .photo_service import PhotoService

__all__ = [
    "AlbumAuthorisationService",
    "PhotoAuthorisationService",
    "PhotoService",
]
