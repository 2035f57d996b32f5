"""Test configuration and fixtures.

This module provides isolated test environments:
- In-memory SQLite database with a fresh schema per test
- Users with different rights
- Factories for actor contexts and authorisation services
"""
import os
import sys
from pathlib import Path
from typing import Dict, Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

# Ensure package is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment BEFORE importing package modules
os.environ["PHOTO_VISIBILITY_DATABASE_URL"] = "sqlite://"


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database with schema.

    StaticPool keeps a single connection so the TestClient thread sees
    the same database.
    """
    from photo_visibility.infrastructure.database import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """Session bound to the isolated database."""
    with Session(engine, expire_on_commit=False, autoflush=False) as session:
        yield session


@pytest.fixture(scope="function")
def users(db_session: Session) -> Dict:
    """Create users with different rights.

    Returns:
        Dict with: admin, alice, bob, uploader
    """
    from photo_visibility.infrastructure.database import User

    created = {
        "admin": User(username="admin", is_admin=True, may_upload=True),
        "alice": User(username="alice"),
        "bob": User(username="bob"),
        "uploader": User(username="uploader", may_upload=True),
    }
    db_session.add_all(created.values())
    db_session.commit()
    return created


@pytest.fixture(scope="function")
def photo_repo(db_session):
    from photo_visibility.infrastructure.repositories import PhotoRepository
    return PhotoRepository(db_session)


@pytest.fixture(scope="function")
def album_repo(db_session):
    from photo_visibility.infrastructure.repositories import AlbumRepository
    return AlbumRepository(db_session)


@pytest.fixture(scope="function")
def config_repo(db_session):
    from photo_visibility.infrastructure.repositories import ConfigRepository
    return ConfigRepository(db_session)


@pytest.fixture(scope="function")
def make_services(db_session):
    """Factory building album and photo authorisation services for an actor.

    Usage:
        albums, photos = make_services(ActorContext(user_id=1))
    """
    from photo_visibility.application.services import (
        AlbumAuthorisationService,
        PhotoAuthorisationService,
    )
    from photo_visibility.infrastructure.repositories import (
        AlbumRepository,
        ConfigRepository,
        PhotoRepository,
    )

    def factory(actor):
        album_auth = AlbumAuthorisationService(actor, AlbumRepository(db_session))
        photo_auth = PhotoAuthorisationService(
            actor=actor,
            config=ConfigRepository(db_session),
            album_policy=album_auth,
            photo_repository=PhotoRepository(db_session),
        )
        return album_auth, photo_auth

    return factory


@pytest.fixture(scope="function")
def public_photos_shown(config_repo):
    """Disable the public-photos-hidden setting."""
    from photo_visibility.config import PUBLIC_PHOTOS_HIDDEN_KEY

    config_repo.set_value(PUBLIC_PHOTOS_HIDDEN_KEY, False)
