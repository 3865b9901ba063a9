# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from collections.abc import Callable
from http import HTTPStatus
from typing import TYPE_CHECKING

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException

from servicekit.shared.context import ContextKey, set_context_value

from .base import (
    GENERIC_ERROR_MESSAGE,
    UNKNOWN_ERROR_CODE,
    VALIDATION_ERROR_CODE,
    DomainError,
    HTTPError,
    ValidationErrors,
    find_error,
    internal_server_error,
)

if TYPE_CHECKING:
    from .registry import ErrorRegistry

# order is the classification priority
_ERROR_KINDS: tuple[type[BaseException], ...] = (
    HTTPError,
    ValidationErrors,
    DomainError,
    HTTPException,
)


def _slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or UNKNOWN_ERROR_CODE


def _classify(error: BaseException) -> BaseException:
    for kind in _ERROR_KINDS:
        found = find_error(error, kind)
        if found is not None:
            return found
    return error


def coerce(error: BaseException) -> HTTPError:
    """Map any error to the ``HTTPError`` that should be sent to the client."""
    match _classify(error):
        case HTTPError() as http_error:
            return http_error
        case ValidationErrors() as validation:
            return HTTPError(
                status=HTTPStatus.UNPROCESSABLE_ENTITY,
                slug=VALIDATION_ERROR_CODE,
                message=validation.message,
                details=validation.validations,
                cause="" if validation is error else str(error),
            )
        case DomainError() as domain:
            status = domain.status or (
                HTTPStatus.BAD_REQUEST if domain.code else HTTPStatus.INTERNAL_SERVER_ERROR
            )
            return HTTPError(
                status=status,
                slug=domain.code or UNKNOWN_ERROR_CODE,
                message=domain.message or GENERIC_ERROR_MESSAGE,
                details=list(domain.details),
                cause=domain.cause_message(),
            )
        case HTTPException() as exc:
            return HTTPError(
                status=exc.code or HTTPStatus.INTERNAL_SERVER_ERROR,
                slug=_slugify(exc.name),
                message=exc.description or exc.name,
                headers={
                    name: value
                    for name, value in exc.get_headers()
                    if name.lower() != "content-type"
                },
            )
        case _:
            return internal_server_error(error)


def handle_app_error(error: HTTPError) -> tuple[Response, int]:
    response = jsonify({"error": error.to_dict()})
    if error.headers:
        response.headers.update(error.headers)
    return response, error.status


def register_error_handler(app: Flask, *, registry: ErrorRegistry | None = None) -> None:
    """Serialize every exception raised by a view as the JSON error envelope.

    The resolved ``HTTPError`` and the original exception are kept on the
    request context for the request logging middleware.
    """
    resolve: Callable[[BaseException], HTTPError] = (
        registry.get if registry is not None else coerce
    )

    @app.errorhandler(Exception)
    def _handle_error(exc: Exception):
        http_error = resolve(exc)
        set_context_value(ContextKey.HTTP_ERROR, http_error)
        set_context_value(ContextKey.EXCEPTION, exc)
        return handle_app_error(http_error)


__all__ = ["coerce", "handle_app_error", "register_error_handler"]
