"""
Exception classes for the Upstash Kafka client.

Every fallible operation either returns a decoded value or raises a subclass
of :class:`UpstashError`. The error carries a human readable message, an
opaque provider code and a kind used for programmatic branching.
"""

import json
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Type

import pydantic


logger = logging.getLogger(__name__)


DEFAULT_CODE = "NA"


class ErrorKind(str, Enum):
    """Failure kinds surfaced by the client."""

    INTERNAL = "INTERNAL"
    INVALID_DATA = "INVALID_DATA"
    API_ERROR = "API_ERROR"


class UpstashError(Exception):
    """Base exception class for all client errors.

    The display text is the message only; ``kind`` and ``code`` are kept for
    callers that need to branch on the failure.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        code: str = DEFAULT_CODE,
        detail: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            kind: Failure kind, defaults to the class kind
            code: Provider-assigned error code
            detail: Remote error detail (API errors only)
            details: Additional error context
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.code = code
        self.detail = detail
        self.details = details or {}
        self.cause = cause

        logger.debug(f"Exception created: {self.kind.value} - {message}", exc_info=cause)

    def __str__(self) -> str:
        return self.message

    @staticmethod
    def from_builder(target: str, missing: str) -> "InternalError":
        """Error for a value that cannot be built because a part is missing."""
        return InternalError(f"{target} cannot be constructed without {missing}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        result = {
            "error": self.kind.value,
            "message": self.message,
            "code": self.code,
            "details": dict(self.details)
        }

        if self.detail is not None:
            result["details"]["detail"] = self.detail

        if self.cause:
            result["details"]["cause"] = str(self.cause)
            result["details"]["cause_type"] = type(self.cause).__name__

        return result


class InternalError(UpstashError):
    """URL construction, transport failure or programming misuse."""

    kind = ErrorKind.INTERNAL


class InvalidDataError(UpstashError):
    """Local validation failure."""

    kind = ErrorKind.INVALID_DATA


class ApiError(UpstashError):
    """The remote service answered but the answer could not be used.

    Raised when a response body cannot be decoded into the expected type, or
    when a caller promotes an error embedded in a response envelope.
    """

    kind = ErrorKind.API_ERROR

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        code: str = DEFAULT_CODE,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        details = dict(details or {})
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message,
            code=code,
            detail=detail if detail is not None else message,
            details=details,
            cause=cause
        )
        self.status_code = status_code


class AlreadyInitializedError(InternalError):
    """Raised when a process-wide client slot is set a second time."""

    def __init__(self, target: str):
        super().__init__(
            f"Client for '{target}' is already initialized",
            details={"target": target}
        )


class ConfigurationError(InternalError):
    """Raised at startup when required configuration is missing or invalid."""

    def __init__(self, message: str, variable: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(
            message,
            details={"variable": variable} if variable else None,
            cause=cause
        )


_DECODE_CAUSES = (pydantic.ValidationError, json.JSONDecodeError, UnicodeDecodeError)

_KIND_CLASSES: Dict[ErrorKind, Type[UpstashError]] = {
    ErrorKind.INTERNAL: InternalError,
    ErrorKind.INVALID_DATA: InvalidDataError,
    ErrorKind.API_ERROR: ApiError,
}


def kind_of(exc: BaseException) -> ErrorKind:
    """Map a lower-level exception to the error kind it is reported as."""
    if isinstance(exc, UpstashError):
        return exc.kind
    if isinstance(exc, _DECODE_CAUSES):
        return ErrorKind.API_ERROR
    return ErrorKind.INTERNAL


def wrap_error(exc: BaseException, message: str, kind: Optional[ErrorKind] = None) -> UpstashError:
    """Attach a descriptive message to a lower-level failure.

    The kind is recomputed from the wrapped exception unless given; an
    :class:`UpstashError` is returned unchanged.
    """
    if isinstance(exc, UpstashError):
        return exc

    kind = kind or kind_of(exc)
    if kind is ErrorKind.API_ERROR:
        return ApiError(message, detail=str(exc), cause=exc)
    return _KIND_CLASSES[kind](message, cause=exc)


@contextmanager
def context(message: str, kind: Optional[ErrorKind] = None) -> Iterator[None]:
    """Wrap any failure raised inside the block with ``message``.

    Usage::

        with context("Invalid route"):
            url = base.join(route)
    """
    try:
        yield
    except UpstashError:
        raise
    except Exception as e:
        raise wrap_error(e, message, kind) from e
