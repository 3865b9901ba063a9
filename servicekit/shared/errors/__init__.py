from .base import (
    ACTION_DENIED,
    BAD_INPUT,
    DEFAULT_VALIDATION_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    REQUEST_VALIDATION,
    UNAUTHORIZED,
    UNKNOWN_ERROR_CODE,
    VALIDATION_ERROR_CODE,
    DomainError,
    HTTPError,
    ValidationErrors,
    bad_request,
    conflict,
    error_category,
    find_error,
    forbidden,
    internal_server_error,
    is_error,
    new_error,
    new_http_error,
    not_found,
    unauthorized,
    unprocessable_entity,
    walk_error,
)
from .http import coerce, handle_app_error, register_error_handler
from .registry import ErrorRegistry

__all__ = [
    "ACTION_DENIED",
    "BAD_INPUT",
    "DEFAULT_VALIDATION_MESSAGE",
    "GENERIC_ERROR_MESSAGE",
    "REQUEST_VALIDATION",
    "UNAUTHORIZED",
    "UNKNOWN_ERROR_CODE",
    "VALIDATION_ERROR_CODE",
    "DomainError",
    "ErrorRegistry",
    "HTTPError",
    "ValidationErrors",
    "bad_request",
    "coerce",
    "conflict",
    "error_category",
    "find_error",
    "forbidden",
    "handle_app_error",
    "internal_server_error",
    "is_error",
    "new_error",
    "new_http_error",
    "not_found",
    "register_error_handler",
    "unauthorized",
    "unprocessable_entity",
    "walk_error",
]
