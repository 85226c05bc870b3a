from .base import (
    AppError,
    CredentialsValidationError,
    DomainError,
    InvalidJsonBodyError,
    ValidationError,
)
from .http import handle_app_error, handle_http_exception, register_error_handler

__all__ = [
    "AppError",
    "CredentialsValidationError",
    "DomainError",
    "InvalidJsonBodyError",
    "ValidationError",
    "handle_app_error",
    "handle_http_exception",
    "register_error_handler",
]
