"""Monadic Error Handling Types

Result/Either types for deterministic error propagation through the
grammar engines. Callers branch with ``match`` over ``Ok``/``Err`` or
call ``unwrap()`` to turn an ``Err`` back into an exception.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Numbered error codes, grouped by the thousands digit.

    E2xxx: Validation errors (bad caller input)
    E5xxx: Grammar invariants (rule tables disagree with the matcher)
    E6xxx: Resource errors (rule tables, word lists, dictionaries)
    E9xxx: Internal/Unknown errors
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003

    # Grammar invariants (E5xxx)
    E5004_INVARIANT_VIOLATED = 5004

    # Resource (E6xxx)
    E6001_FILE_NOT_FOUND = 6001
    E6002_FILE_READ_ERROR = 6002

    # Internal (E9xxx)
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def http_status(self) -> int:
        """Bad input is the caller's fault; everything else is ours."""
        return 400 if 2000 <= self.value < 3000 else 500

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 5000 <= code < 6000:
            return "grammar"
        if 6000 <= code < 7000:
            return "resource"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was raised, for log correlation."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""
    request_id: str | None = None


@dataclass(frozen=True, slots=True)
class AppError:
    """Application error with code, message, metadata and tracing context.

    ``metadata`` carries the offending field, value and bounds so API
    clients can point at the bad input. ``cause`` keeps the original
    exception for logs; it is never serialized.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_context(self, **kwargs) -> AppError:
        """Copy with request identifiers filled in; unset values keep the current ones."""
        new_ctx = ErrorContext(
            correlation_id=kwargs.get("correlation_id") or self.context.correlation_id,
            timestamp=self.context.timestamp,
            origin=kwargs.get("origin", self.context.origin),
            request_id=kwargs.get("request_id", self.context.request_id),
        )
        return AppError(
            code=self.code,
            message=self.message,
            context=new_ctx,
            metadata=self.metadata,
            cause=self.cause,
        )

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Raised by the engines' public methods, which do not return a Result.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises the wrapped error as AppErrorException."""
        raise AppErrorException(self.error)

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
) -> Err[AppError]:
    """Convert an exception to Err; an AppErrorException keeps its own error."""
    if isinstance(exc, AppErrorException):
        return Err(exc.error)
    return Err(AppError(
        code=code,
        message=str(exc),
        context=ErrorContext(origin=origin),
        metadata={"error_type": type(exc).__name__},
        cause=exc,
    ))


def try_result(
    f: Callable[[], T],
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
) -> Result[T, AppError]:
    """Run ``f`` and wrap its value, or the exception it raised, in a Result."""
    try:
        return Ok(f())
    except Exception as e:
        return from_exception(e, code=code, origin=origin)
