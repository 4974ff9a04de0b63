"""Domain-Specific Error Builders

Ergonomic constructors for typed errors raised by the grammar engines.
Each builder creates AppError with appropriate code and context.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Required field '{field}' is missing",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
    )


def invalid_format(
    field: str, expected: str, got: str | None = None, origin: str = ""
) -> Err[AppError]:
    msg = f"Invalid format for '{field}': expected {expected}"
    if got:
        msg += f", got '{got}'"
    return validation_error(
        msg,
        code=ErrorCode.E2002_INVALID_FORMAT,
        field=field,
        value=got,
        expected=expected,
        origin=origin,
    )


def out_of_range(
    field: str,
    value: int | float | str,
    min_val: int | float | None = None,
    max_val: int | float | None = None,
    origin: str = "",
) -> Err[AppError]:
    bounds = []
    if min_val is not None:
        bounds.append(f">= {min_val}")
    if max_val is not None:
        bounds.append(f"<= {max_val}")
    msg = f"Value {value} for '{field}' out of range ({', '.join(bounds)})"
    return validation_error(
        msg,
        code=ErrorCode.E2003_OUT_OF_RANGE,
        field=field,
        value=str(value),
        min=min_val,
        max=max_val,
        origin=origin,
    )


# =============================================================================
# Resource Errors (E6xxx)
# =============================================================================

def resource_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E6002_FILE_READ_ERROR,
    path: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create error for an unreadable or malformed data resource."""
    meta = {"path": path, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def file_not_found(path: str, origin: str = "") -> Err[AppError]:
    return resource_error(
        f"Resource not found: {path}",
        code=ErrorCode.E6001_FILE_NOT_FOUND,
        path=path,
        origin=origin,
    )


# =============================================================================
# Grammar Invariants (E5004)
# =============================================================================

def assertion_failed(condition: str, origin: str = "", **metadata) -> Err[AppError]:
    """A grammar table broke an invariant the matcher relies on."""
    return Err(AppError(
        code=ErrorCode.E5004_INVARIANT_VIOLATED,
        message=f"Assertion failed: {condition}",
        context=ErrorContext(origin=origin),
        metadata={"condition": condition, **metadata},
    ))
