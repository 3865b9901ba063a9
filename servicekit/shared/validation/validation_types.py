# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    """Error types raised by the library's own rules.

    Pydantic's built-in types (``missing``, ``string_too_short`` ...) are used
    as-is and are not repeated here.
    """

    REQUIRED = "required"
    EMAIL = "email"
    UNKNOWN = "unknown"


__all__ = ["ValidationErrorType"]
