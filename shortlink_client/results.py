"""Normalized outcome of a single backend call.

A ``CallResult`` holds either a payload or an ``ApiError``, never both.
Failures are classified by ``ErrorKind`` so callers can branch on the kind
instead of matching message text; ``ApiError.message`` is the text shown to
users.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    REQUEST_FAILED = "request_failed"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class ApiError:
    kind: ErrorKind
    message: str
    status_code: int | None = None
    retry_after: str | None = None

    @property
    def retry_after_seconds(self) -> int | None:
        if self.retry_after is None:
            return None
        try:
            return int(self.retry_after)
        except ValueError:
            return None

    @staticmethod
    def transport(error: BaseException) -> "ApiError":
        return ApiError(kind=ErrorKind.TRANSPORT, message=str(error) or "Network error")

    @staticmethod
    def unauthorized() -> "ApiError":
        return ApiError(kind=ErrorKind.UNAUTHORIZED, message=SESSION_EXPIRED_MESSAGE, status_code=401)

    @staticmethod
    def rate_limited(retry_after: str) -> "ApiError":
        return ApiError(
            kind=ErrorKind.RATE_LIMITED,
            message=f"Too many requests. Please try again in {retry_after} seconds.",
            status_code=429,
            retry_after=retry_after,
        )

    @staticmethod
    def request_failed(status_code: int, server_message: str | None = None) -> "ApiError":
        return ApiError(
            kind=ErrorKind.REQUEST_FAILED,
            message=server_message or f"Request failed with status {status_code}",
            status_code=status_code,
        )

    @staticmethod
    def malformed_response(status_code: int | None = None) -> "ApiError":
        if status_code is None:
            message = "Received a response in an unexpected format from the server"
        else:
            message = f"Received an unreadable response from the server (status {status_code})"
        return ApiError(kind=ErrorKind.MALFORMED_RESPONSE, message=message, status_code=status_code)

    def __str__(self) -> str:
        return self.message


class ApiCallError(RuntimeError):
    def __init__(self, error: ApiError):
        super().__init__(error.message)
        self.error = error
        self.status_code = error.status_code


@dataclass(frozen=True)
class CallResult(Generic[T]):
    data: T | None = None
    error: ApiError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.data is not None:
            raise ValueError("CallResult cannot carry both a payload and an error")

    @classmethod
    def success(cls, data: T | None) -> "CallResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: ApiError) -> "CallResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None

    @property
    def session_invalidated(self) -> bool:
        return self.error is not None and self.error.kind is ErrorKind.UNAUTHORIZED

    def map(self, transform: Callable[[T], U]) -> "CallResult[U]":
        """Apply ``transform`` to a successful, non-empty payload.

        A payload whose shape ``transform`` cannot handle becomes a
        ``MALFORMED_RESPONSE`` error.
        """
        if self.error is not None:
            return CallResult(error=self.error)
        if self.data is None:
            return CallResult(data=None)
        try:
            converted = transform(self.data)
        except (KeyError, TypeError, ValueError, AttributeError) as error:
            logger.error("Response payload has an unexpected shape: %r", error)
            return CallResult(error=ApiError.malformed_response())
        return CallResult(data=converted)

    def unwrap(self) -> T | None:
        if self.error is not None:
            raise ApiCallError(self.error)
        return self.data

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error.message}
        return {"data": self.data}
