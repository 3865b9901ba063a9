# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any

SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "set-cookie",
        "access-token",
        "x-api-key",
        "x-auth-token",
        "x-csrf-token",
        "x-session-id",
    }
)

SENSITIVE_PARAMS = ("password", "token", "key", "secret", "auth")


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    sanitized = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            sanitized[key] = f"<hashed:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
        else:
            sanitized[key] = value
    return sanitized


def sanitize_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in params.items():
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in SENSITIVE_PARAMS):
            sanitized[key] = "<redacted>"
        else:
            sanitized[key] = value
    return sanitized


__all__ = ["sanitize_headers", "sanitize_query_params"]
