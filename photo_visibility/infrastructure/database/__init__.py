"""SQLAlchemy models and declarative base."""
from .models import Base, User, Album, Photo, Config, album_shares

__all__ = [
    "Base",
    "User",
    "Album",
    "Photo",
    "Config",
    "album_shares",
]
