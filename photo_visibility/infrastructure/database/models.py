"""SQLAlchemy models for the gallery tables.

Only the columns the visibility rules read are mapped here.
"""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


# ---------------------------
# USERS
# ---------------------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    may_upload = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<User {self.username}>"


# Albums shared with individual users
album_shares = Table(
    "album_shares",
    Base.metadata,
    Column("album_id", ForeignKey("albums.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


# ---------------------------
# ALBUMS
# ---------------------------
class Album(Base):
    __tablename__ = "albums"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    public = Column(Boolean, default=False, nullable=False)
    password = Column(String(255), nullable=True)

    owner = relationship("User", foreign_keys=[owner_id])
    shared_with = relationship("User", secondary=album_shares)
    photos = relationship("Photo", back_populates="album")

    def __repr__(self):
        return f"<Album {self.title}>"


# ---------------------------
# PHOTOS
# ---------------------------
class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False, default="")
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    public = Column(Boolean, default=False, nullable=False)
    # NULL means the photo is unsorted
    album_id = Column(Integer, ForeignKey("albums.id", ondelete="SET NULL"), nullable=True, index=True)

    album = relationship("Album", back_populates="photos")

    def __repr__(self):
        return f"<Photo {self.id}>"


# ---------------------------
# SETTINGS
# ---------------------------
class Config(Base):
    """Key/value runtime settings, values stored as text ('0'/'1' for flags)."""
    __tablename__ = "configs"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=True)
