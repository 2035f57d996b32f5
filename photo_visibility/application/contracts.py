"""Collaborator protocols consumed by the authorisation services."""
from typing import Any, Protocol

from sqlalchemy import Select


class ConfigLookup(Protocol):
    """Named runtime settings."""

    def get_bool(self, key: str, default: bool) -> bool: ...


class AlbumAccessibilityPolicy(Protocol):
    """Decides which albums the current actor may access."""

    def is_accessible(self, album: Any) -> bool: ...
    def apply_accessibility_filter(self, query: Select) -> Select: ...


class PhotoQuerySource(Protocol):
    """Builds and probes photo queries."""

    def id_query(self, photo_id: Any) -> Select: ...
    def exists(self, query: Select) -> bool: ...
