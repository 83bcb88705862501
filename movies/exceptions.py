"""
Errors raised by the movie catalog service.

Missing movies are not errors: lookups return None and mutations return False.
"""


class MovieCatalogError(Exception):
    """Base class for catalog errors."""


class MalformedNameError(MovieCatalogError, ValueError):
    """A person name that cannot be split into a first and a last name."""

    def __init__(self, name, message=None):
        self.name = name
        super().__init__(message or f"'{name}' must contain a first and a last name separated by a space.")


class MovieOwnershipError(MovieCatalogError, PermissionError):
    """The caller tried to change a movie it did not create."""

    def __init__(self, movie_id, creator_id):
        self.movie_id = movie_id
        self.creator_id = creator_id
        super().__init__(f"User {creator_id} is not the creator of movie {movie_id}.")
