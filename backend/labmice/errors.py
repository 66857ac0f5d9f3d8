"""Error taxonomy shared by the stores and the HTTP layer."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_FIELDS = "missing_fields"
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_VALUE = "invalid_value"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"
    UNKNOWN = "unknown"


HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MISSING_FIELDS: 400,
    ErrorKind.INVALID_IDENTIFIER: 400,
    ErrorKind.INVALID_VALUE: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    # login failures only; other lookups raise NotFound
    ErrorKind.USER_NOT_FOUND: 401,
    ErrorKind.WRONG_PASSWORD: 401,
    ErrorKind.UNKNOWN: 500,
}


class StoreError(RuntimeError):
    """Base error for store operations.

    Subclasses pin ``kind`` and a default message; callers may pass a more
    specific message.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message = "Unexpected error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return HTTP_STATUS[self.kind]


class MissingFields(StoreError):
    """Raised when a required argument is absent or blank."""

    kind = ErrorKind.MISSING_FIELDS
    default_message = "All required fields must be provided"


class InvalidIdentifier(StoreError):
    """Raised when a supplied reference is not a well-formed identifier."""

    kind = ErrorKind.INVALID_IDENTIFIER
    default_message = "Invalid ID provided"


class InvalidValue(StoreError):
    kind = ErrorKind.INVALID_VALUE
    default_message = "Invalid value provided"


class NotFound(StoreError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Record not found"


class MouseNotFound(NotFound):
    default_message = "Mouse not found"


class EntryNotFound(NotFound):
    default_message = "Log entry not found"


class AlreadyExists(StoreError):
    kind = ErrorKind.ALREADY_EXISTS
    default_message = "Record already exists"


class UserAlreadyExists(AlreadyExists):
    default_message = "Username or email already in use"


class MouseAlreadyExists(AlreadyExists):
    default_message = "Mouse already exists"


class UserNotFound(StoreError):
    """Raised by login when no user has the given username."""

    kind = ErrorKind.USER_NOT_FOUND
    default_message = "User not found"


class WrongPassword(StoreError):
    kind = ErrorKind.WRONG_PASSWORD
    default_message = "Wrong password"


class UnknownStoreError(StoreError):
    kind = ErrorKind.UNKNOWN
