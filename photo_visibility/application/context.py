"""Actor context - who is asking.

An ``ActorContext`` is built once per request and handed to the
authorisation services. It is never stored globally.
"""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ActorContext:
    """Read-only view of the current actor.

    Attributes:
        user_id: ID of the logged in user, None for anonymous visitors
        is_admin: Admins see everything
        may_upload: Upload right of the user
        unlocked_album_ids: Password protected albums unlocked in this session,
            normalised to integer IDs
    """

    user_id: Optional[int] = None
    is_admin: bool = False
    may_upload: bool = False
    unlocked_album_ids: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        # Session stores may hand album IDs over as strings
        object.__setattr__(
            self, "unlocked_album_ids", frozenset(int(album_id) for album_id in self.unlocked_album_ids)
        )

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def can_upload(self) -> bool:
        """Upload right; anonymous visitors never have it."""
        return self.is_authenticated and self.may_upload

    def is_current_user(self, user_id: Optional[int]) -> bool:
        """Check if the given user ID belongs to the current actor."""
        return self.is_authenticated and user_id == self.user_id

    @classmethod
    def anonymous(cls, unlocked_album_ids=()) -> "ActorContext":
        return cls(unlocked_album_ids=frozenset(unlocked_album_ids))

    @classmethod
    def from_user(cls, user: Any, unlocked_album_ids=()) -> "ActorContext":
        """Build context from a user dict or ``User`` model.

        Args:
            user: Mapping with ``id``, ``is_admin``, ``may_upload`` keys,
                an object with those attributes, or None
            unlocked_album_ids: Album IDs unlocked by password

        Returns:
            ActorContext for the user (anonymous if user is None)
        """
        if user is None:
            return cls.anonymous(unlocked_album_ids)
        if isinstance(user, dict):
            return cls(
                user_id=user["id"],
                is_admin=bool(user.get("is_admin", False)),
                may_upload=bool(user.get("may_upload", False)),
                unlocked_album_ids=frozenset(unlocked_album_ids),
            )
        return cls(
            user_id=user.id,
            is_admin=bool(user.is_admin),
            may_upload=bool(user.may_upload),
            unlocked_album_ids=frozenset(unlocked_album_ids),
        )
