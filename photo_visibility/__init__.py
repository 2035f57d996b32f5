"""Photo visibility rules for the gallery backend."""
