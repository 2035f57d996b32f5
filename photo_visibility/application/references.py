"""Photo references - a photo given either by ID or as a loaded model."""
from dataclasses import dataclass
from typing import Optional, Union

from ..infrastructure.database import Photo


@dataclass(frozen=True)
class ById:
    """Photo known only by its ID."""
    photo_id: Union[int, str]


@dataclass(frozen=True)
class ByEntity:
    """Photo already loaded from the database."""
    photo: Photo

    @property
    def photo_id(self):
        return self.photo.id


PhotoRef = Union[ById, ByEntity]


def as_photo_ref(value) -> PhotoRef:
    """Wrap a photo, a photo ID or an existing reference into a ``PhotoRef``."""
    if isinstance(value, (ById, ByEntity)):
        return value
    if isinstance(value, Photo):
        return ByEntity(value)
    return ById(value)


def disassemble_photo(value) -> tuple[Union[int, str], Optional[Photo]]:
    """Split a photo parameter into ``(photo_id, photo)``.

    A loaded photo yields ``(photo.id, photo)``; an ID yields ``(id, None)``.
    Never loads anything from the database.
    """
    ref = as_photo_ref(value)
    if isinstance(ref, ByEntity):
        return ref.photo_id, ref.photo
    return ref.photo_id, None
