"""Exceptions raised across layers"""


class GameError(Exception):
    """Base class for everything that can go wrong while handling a gameroom game."""


class InvalidRecordError(GameError):
    """The game record violates one of its invariants (wrong seating, unknown status, missing timestamps)."""


class InvalidRequestError(GameError):
    """A request coming in from the API layer could not be interpreted."""


class RepositoryError(GameError):
    """Persistence layer could not deliver the requested record."""
