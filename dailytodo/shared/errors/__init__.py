from .base import (
    AppError,
    AuthenticationError,
    ConfigurationError,
    DomainError,
    InfrastructureError,
    StoreUnavailableError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConfigurationError",
    "DomainError",
    "InfrastructureError",
    "StoreUnavailableError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
