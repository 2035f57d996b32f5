# Repository Pattern Implementation
"""
Repositories abstract database operations.
Each entity has its own repository.

Usage:
    repo = PhotoRepository(session)
    photo = repo.get_by_id(photo_id)
"""
from .base import Repository, query_entity
from .photo_repository import PhotoRepository
from .album_repository import AlbumRepository
from .config_repository import ConfigRepository

__all__ = [
    "Repository",
    "query_entity",
    "PhotoRepository",
    "AlbumRepository",
    "ConfigRepository",
]
