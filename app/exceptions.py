"""Custom exceptions shared across services."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a service failure, translated to a status at the HTTP boundary."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    INTERNAL = "internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFIGURATION: 500,
    ErrorKind.UPSTREAM: 500,
    ErrorKind.INTERNAL: 500,
}

INTERNAL_ERROR_MESSAGE = "internal error"


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures."""

    message: str
    kind: ErrorKind = ErrorKind.INTERNAL

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class ValidationError(ServiceError):
    """Raised when a request is missing or has a malformed required field."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.VALIDATION)


class ConfigurationError(ServiceError):
    """Raised when required server-side configuration is absent."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.CONFIGURATION)


class RelayError(ServiceError):
    """Raised when the upstream LLM call fails or returns an unusable payload."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.UPSTREAM)


class LinkEncodingError(ServiceError):
    """Raised when scenes cannot be serialized into a share link."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message, ErrorKind.INTERNAL)
