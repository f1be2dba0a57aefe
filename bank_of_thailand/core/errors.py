"""
Unified error definition for the Bank of Thailand client.

A single exception type carries a ``kind`` tag instead of a class per
status code. Callers switch on ``error.kind``.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Classification of a failed call."""
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER = "server"
    REQUEST = "request"


class BOTError(Exception):
    """Base (and only) exception raised by the client."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.REQUEST,
        status_code: Optional[int] = None,
        retry_after: Optional[int] = None,
        url: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = ErrorKind(kind)
        self.status_code = status_code
        self.retry_after = retry_after
        self.url = url
        self.details = details or {}

    @classmethod
    def configuration(cls, message: str, **details: Any) -> "BOTError":
        """Error for invalid or incomplete settings."""
        return cls(message, kind=ErrorKind.CONFIGURATION, details=details)

    @property
    def recoverable(self) -> bool:
        """Whether repeating the same call later could succeed."""
        return self.kind in (ErrorKind.RATE_LIMITED, ErrorKind.SERVER, ErrorKind.REQUEST)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging/serialization."""
        return {
            "error": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "retry_after": self.retry_after,
            "url": self.url,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"BOTError(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code!r})"
