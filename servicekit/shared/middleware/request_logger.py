# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from flask import Flask, Response, g, request

from servicekit.shared.context import (
    ContextKey,
    clear_request_context,
    get_context_value,
    set_context_value,
)
from servicekit.shared.errors import HTTPError
from servicekit.shared.logging import (
    clear_correlation_id,
    sanitize_headers,
    sanitize_query_params,
    set_correlation_id,
)

if TYPE_CHECKING:
    from loguru import Logger

REQUEST_ID_HEADER = "X-Request-Id"
RESPONSE_REQUEST_ID_HEADER = "X-Request-ID"
UNKNOWN = "unknown"


def _log_level(status: int) -> str:
    if status >= 500:
        return "ERROR"
    if status >= 400:
        return "WARNING"
    return "INFO"


def _user_group() -> dict[str, Any]:
    return {
        "email": get_context_value(ContextKey.USER_EMAIL, UNKNOWN),
        "company": get_context_value(ContextKey.USER_COMPANY, UNKNOWN),
        "company_category": get_context_value(ContextKey.USER_COMPANY_CATEGORY, UNKNOWN),
        "permissions": get_context_value(ContextKey.USER_PERMISSIONS, UNKNOWN),
    }


def _request_group(start: datetime, log_headers: bool) -> dict[str, Any]:
    group: dict[str, Any] = {
        "start_time": start.isoformat(),
        "method": request.method,
        "path": request.path,
        "route": request.url_rule.rule if request.url_rule is not None else "",
        "params": dict(request.view_args or {}),
        "queries": sanitize_query_params(request.args.to_dict()),
        "length": request.content_length or 0,
    }
    if log_headers:
        group["headers"] = sanitize_headers(dict(request.headers))
        group["user_agent"] = request.user_agent.string or UNKNOWN
    return group


def _response_group(response: Response, end: datetime) -> dict[str, Any]:
    return {
        "end_time": end.isoformat(),
        "status": response.status_code,
        "length": response.content_length or 0,
    }


def _error_group(error: HTTPError) -> dict[str, Any]:
    return {
        "code": error.slug,
        "category": error.category,
        "message": error.message,
        "cause": error.cause,
        "details": error.details or [],
    }


def _log_request(log: Logger, response: Response, *, log_headers: bool) -> None:
    end = datetime.now(UTC)
    start = getattr(g, "_request_started_at", end)
    started = getattr(g, "_request_t0", time.perf_counter())
    duration_ms = int((time.perf_counter() - started) * 1000)

    fields: dict[str, Any] = {
        "duration_ms": duration_ms,
        "user": _user_group(),
        "request": _request_group(start, log_headers),
        "response": _response_group(response, end),
    }

    prefix = f"{request.endpoint}: " if request.endpoint else ""
    message = f"{prefix}request completed"
    exception = None

    http_error: HTTPError | None = get_context_value(ContextKey.HTTP_ERROR)
    if http_error is not None:
        fields["error"] = _error_group(http_error)
        message = f"{prefix}{http_error.describe()}"
        raised = get_context_value(ContextKey.EXCEPTION)
        if response.status_code >= 500 and not isinstance(raised, HTTPError):
            exception = raised

    log.bind(**fields).opt(exception=exception).log(_log_level(response.status_code), message)


def configure_request_logging(
    app: Flask,
    *,
    logger: Logger,
    log_headers: bool = False,
    request_id_header: str = REQUEST_ID_HEADER,
) -> None:
    """Log exactly one record per request once the response is known.

    The request id comes from ``request_id_header`` or is generated, and is
    echoed back as ``X-Request-ID``. Views reach the request-bound logger
    through ``servicekit.shared.context.get_request_logger``.
    """

    @app.before_request
    def _before_request() -> None:
        clear_request_context()
        request_id = request.headers.get(request_id_header) or str(uuid.uuid4())
        set_correlation_id(request_id)
        set_context_value(ContextKey.REQUEST_ID, request_id)
        set_context_value(ContextKey.LOGGER, logger.bind(request_id=request_id))

        g._request_started_at = datetime.now(UTC)
        g._request_t0 = time.perf_counter()

    @app.after_request
    def _after_request(response: Response) -> Response:
        request_id = get_context_value(ContextKey.REQUEST_ID)
        log = get_context_value(ContextKey.LOGGER)
        if request_id is None or log is None:
            request_id = request.headers.get(request_id_header) or str(uuid.uuid4())
            log = logger.bind(request_id=request_id)

        response.headers[RESPONSE_REQUEST_ID_HEADER] = request_id
        _log_request(log, response, log_headers=log_headers)
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        clear_correlation_id()


__all__ = [
    "REQUEST_ID_HEADER",
    "RESPONSE_REQUEST_ID_HEADER",
    "configure_request_logging",
]
