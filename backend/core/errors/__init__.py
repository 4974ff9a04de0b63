"""Structured errors for the grammar engines and the HTTP API.

Engines raise ``AppErrorException``; each public method also has a
``*_result`` variant returning ``Ok``/``Err``:

    match engine.inflect_result("кот", "generic", "genitive"):
        case Ok(value):
            print(value)
        case Err(error):
            log.warning(error.message, code=error.code.name)

Builders such as ``required_field`` return an ``Err`` so that a guard
reads ``required_field("word").unwrap()``.
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    AppErrorException,
    ErrorCode,
    try_result,
)

from .builders import (
    # Validation (E2xxx)
    required_field,
    invalid_format,
    out_of_range,
    # Resource (E6xxx)
    resource_error,
    file_not_found,
    # Grammar invariants (E5004)
    assertion_failed,
)

from .handlers import (
    register_error_handlers,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "AppErrorException",
    "ErrorCode",
    "try_result",
    "required_field",
    "invalid_format",
    "out_of_range",
    "resource_error",
    "file_not_found",
    "assertion_failed",
    "register_error_handlers",
    "raise_result",
]
