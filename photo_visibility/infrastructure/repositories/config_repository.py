"""Config repository - runtime settings stored in the configs table."""
from typing import Optional

from ..database import Config
from .base import Repository

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigRepository(Repository):
    """Repository for key/value settings.

    Flags are stored as text; the canonical encoding is '0'/'1'.
    """

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get raw setting value, or default if the key is unset."""
        config = self._session.get(Config, key)
        if config is None or config.value is None:
            return default
        return config.value

    def get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean setting.

        Args:
            key: Setting name
            default: Value used when the setting is unset or blank

        Returns:
            Parsed flag

        Raises:
            ValueError: If the stored value is not a recognised flag
        """
        value = self.get_value(key)
        if value is None:
            return default

        normalized = value.strip().lower()
        if not normalized:
            return default
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ValueError(f"Config {key!r} is not a boolean: {value!r}")

    def set_value(self, key: str, value) -> None:
        """Store a setting. Booleans are encoded as '0'/'1'."""
        if isinstance(value, bool):
            value = "1" if value else "0"
        config = self._session.get(Config, key)
        if config is None:
            self._session.add(Config(key=key, value=value))
        else:
            config.value = value
        self._commit()
