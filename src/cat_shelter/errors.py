"""Error kinds surfaced by the shelter service."""


class CatShelterError(Exception):
    """Base class for errors raised to callers of the shelter service."""

    default_message = "Cat shelter error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class AuthorizationError(CatShelterError):
    """The session is invalid or expired."""

    default_message = "Session is not authorized"


class InvalidRequestError(CatShelterError):
    """A referenced entity does not exist where the request requires it."""

    default_message = "Invalid request"


class InternalError(CatShelterError):
    """A dependency stayed unreachable or returned inconsistent data."""

    default_message = "Internal error"
