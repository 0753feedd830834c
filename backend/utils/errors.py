# backend/utils/errors.py
import enum


class ErrorKind(str, enum.Enum):
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INVALID_ARGUMENT = "invalid_argument"


# Base class for failures raised by the user service and the query engine.
# Handlers translate them into HTTP responses; the core never picks a status code.
class UserServiceError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Conflict(UserServiceError):
    kind = ErrorKind.CONFLICT


class NotFound(UserServiceError):
    kind = ErrorKind.NOT_FOUND


class Unauthorized(UserServiceError):
    kind = ErrorKind.UNAUTHORIZED


class InvalidArgument(UserServiceError):
    kind = ErrorKind.INVALID_ARGUMENT
