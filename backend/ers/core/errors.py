# backend/ers/core/errors.py
#
# The HTTP layer maps ErrorKind to a status code (ers.api.errors).

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    AUTHENTICATION = "AUTHENTICATION"
    AUTHORIZATION = "AUTHORIZATION"
    NOT_FOUND = "NOT_FOUND"
    RESOURCE_PERSISTENCE = "RESOURCE_PERSISTENCE"
    STATE_CONFLICT = "STATE_CONFLICT"
    INTERNAL = "INTERNAL"


class AppError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str = None, kind: ErrorKind = None):
        self.message = message or self.default_message
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class BadRequestError(AppError):
    kind = ErrorKind.BAD_REQUEST
    default_message = "Invalid parameters provided"


class ResourceNotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "No resource found using provided parameters"


class AuthenticationError(AppError):
    kind = ErrorKind.AUTHENTICATION
    default_message = "Authentication failed"


class AuthorizationError(AppError):
    kind = ErrorKind.AUTHORIZATION
    default_message = "Insufficient permissions for the requested operation"


class ResourcePersistenceError(AppError):
    kind = ErrorKind.RESOURCE_PERSISTENCE
    default_message = "The resource could not be persisted"


class StateConflictError(AppError):
    kind = ErrorKind.STATE_CONFLICT
    default_message = "The resource is not in a state that allows this operation"


class InternalError(AppError):
    kind = ErrorKind.INTERNAL
    default_message = "An unexpected error occurred"
