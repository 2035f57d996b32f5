"""Shared FastAPI dependencies.

Every request gets its own ``ActorContext`` and its own service
instances; nothing actor-related is kept at module level.
"""
from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from .application.context import ActorContext
from .application.services import AlbumAuthorisationService, PhotoAuthorisationService, PhotoService
from .database import get_db
from .infrastructure.repositories import AlbumRepository, ConfigRepository, PhotoRepository


def get_current_user(request: Request) -> dict | None:
    """Get current user from request state."""
    return getattr(request.state, "user", None)


def require_user(request: Request) -> dict:
    """Require authenticated user, raise 401 if not authenticated."""
    user = get_current_user(request)
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def get_actor_context(request: Request) -> ActorContext:
    """Build the actor context for the current request.

    Unlocked albums are set on ``request.state.unlocked_albums`` by the
    session middleware.
    """
    unlocked = getattr(request.state, "unlocked_albums", None) or ()
    return ActorContext.from_user(get_current_user(request), unlocked)


def get_album_authorisation_service(
    actor: ActorContext = Depends(get_actor_context),
    db: Session = Depends(get_db)
) -> AlbumAuthorisationService:
    """Create AlbumAuthorisationService for the current actor."""
    return AlbumAuthorisationService(actor, AlbumRepository(db))


def get_photo_authorisation_service(
    actor: ActorContext = Depends(get_actor_context),
    album_authorisation: AlbumAuthorisationService = Depends(get_album_authorisation_service),
    db: Session = Depends(get_db)
) -> PhotoAuthorisationService:
    """Create PhotoAuthorisationService for the current actor."""
    return PhotoAuthorisationService(
        actor=actor,
        config=ConfigRepository(db),
        album_policy=album_authorisation,
        photo_repository=PhotoRepository(db)
    )


def get_photo_service(
    photo_authorisation: PhotoAuthorisationService = Depends(get_photo_authorisation_service),
    db: Session = Depends(get_db)
) -> PhotoService:
    """Create PhotoService with repositories."""
    return PhotoService(
        photo_repository=PhotoRepository(db),
        photo_authorisation=photo_authorisation
    )
