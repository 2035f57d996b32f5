"""Infrastructure layer - persistence for users, albums, photos and settings."""
