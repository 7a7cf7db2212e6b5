"""
Error taxonomy shared by the store, the session gate and the routes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    STORAGE = "storage"
    UPSTREAM = "upstream"

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self]


STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 500,
    ErrorKind.UPSTREAM: 500,
}


class BackendError(Exception):
    """Base error carrying an ErrorKind and a short user-facing message."""

    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def as_dict(self) -> dict:
        body: dict = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidInput(BackendError):
    kind = ErrorKind.INVALID_INPUT


class Unauthorized(BackendError):
    kind = ErrorKind.UNAUTHORIZED


class Forbidden(BackendError):
    kind = ErrorKind.FORBIDDEN


class NotFound(BackendError):
    kind = ErrorKind.NOT_FOUND


class StorageError(BackendError):
    kind = ErrorKind.STORAGE


class UpstreamError(BackendError):
    kind = ErrorKind.UPSTREAM
