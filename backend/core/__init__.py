"""Ambient services shared by the engines, the API and the scripts."""
from core.config import settings, get_settings
from core.logging import (
    configure_logging,
    get_logger,
    api_logger,
    engine_logger,
    data_logger,
)
from core.errors import AppError, AppErrorException, ErrorCode

__all__ = [
    "settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "api_logger",
    "engine_logger",
    "data_logger",
    "AppError",
    "AppErrorException",
    "ErrorCode",
]
