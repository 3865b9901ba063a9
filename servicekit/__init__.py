# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared error handling, validation and request logging for Flask services."""

from servicekit.app import create_app
from servicekit.interfaces.http.controllers.health_controller import HealthController
from servicekit.interfaces.http.request import parse_request_body
from servicekit.shared.config import KitConfig, load_config
from servicekit.shared.context import ContextKey, get_request_logger, set_user
from servicekit.shared.errors import (
    DomainError,
    ErrorRegistry,
    HTTPError,
    ValidationErrors,
    coerce,
    new_error,
    register_error_handler,
)
from servicekit.shared.logging import new_logger, setup_logging
from servicekit.shared.middleware.request_logger import configure_request_logging
from servicekit.shared.validation import Email, Required, Validator

__all__ = [
    "ContextKey",
    "DomainError",
    "Email",
    "ErrorRegistry",
    "HTTPError",
    "HealthController",
    "KitConfig",
    "Required",
    "ValidationErrors",
    "Validator",
    "coerce",
    "configure_request_logging",
    "create_app",
    "get_request_logger",
    "load_config",
    "new_error",
    "new_logger",
    "parse_request_body",
    "register_error_handler",
    "set_user",
    "setup_logging",
]
