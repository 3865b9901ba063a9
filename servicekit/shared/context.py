# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request-scoped values shared between middleware and views.

Values live on ``flask.g`` so they disappear with the application context of
the request that set them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from flask import g

if TYPE_CHECKING:
    from loguru import Logger


class ContextKey(StrEnum):
    LOGGER = "servicekit_logger"
    REQUEST_ID = "servicekit_request_id"
    HTTP_ERROR = "servicekit_http_error"
    EXCEPTION = "servicekit_exception"
    USER_EMAIL = "servicekit_user_email"
    USER_COMPANY = "servicekit_user_company"
    USER_COMPANY_CATEGORY = "servicekit_user_company_category"
    USER_PERMISSIONS = "servicekit_user_permissions"


def set_context_value(key: ContextKey, value: Any) -> None:
    setattr(g, key.value, value)


def get_context_value(key: ContextKey, default: Any = None) -> Any:
    return getattr(g, key.value, default)


def set_user(
    *,
    email: str | None = None,
    company: str | None = None,
    company_category: str | None = None,
    permissions: Any = None,
) -> None:
    """Attach the authenticated user to the current request for logging."""
    values = {
        ContextKey.USER_EMAIL: email,
        ContextKey.USER_COMPANY: company,
        ContextKey.USER_COMPANY_CATEGORY: company_category,
        ContextKey.USER_PERMISSIONS: permissions,
    }
    for key, value in values.items():
        if value is not None:
            set_context_value(key, value)


def clear_request_context() -> None:
    """Drop every value a previous request left on ``g``.

    ``g`` belongs to the app context, which is shared by all requests handled
    while an outer app context is pushed.
    """
    for key in ContextKey:
        g.pop(key.value, None)


def get_request_id() -> str | None:
    return get_context_value(ContextKey.REQUEST_ID)


def get_request_logger() -> Logger | None:
    return get_context_value(ContextKey.LOGGER)


__all__ = [
    "ContextKey",
    "clear_request_context",
    "get_context_value",
    "get_request_id",
    "get_request_logger",
    "set_context_value",
    "set_user",
]
