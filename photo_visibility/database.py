"""Database engine and session management.

Sessions are request scoped: FastAPI routes obtain one through ``get_db``.
"""
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .config import DATABASE_URL, SQL_ECHO
from .infrastructure.database import Base

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, future=True)
SessionLocal = sessionmaker(engine, class_=Session, expire_on_commit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""
    with SessionLocal() as session:
        yield session


def init_db() -> None:
    """Create all tables that don't exist yet."""
    Base.metadata.create_all(engine)
