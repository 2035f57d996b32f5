"""Errors raised by the authorisation services."""


class InvalidQueryError(ValueError):
    """A query was passed to a filter that does not select the expected model."""
