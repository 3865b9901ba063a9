# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Wire schemas for the JSON error envelope."""

from __future__ import annotations

from pydantic import BaseModel


class HTTPErrorSchema(BaseModel):
    code: str
    message: str
    details: list[str] | None = None
    status_code: int


class ErrorEnvelope(BaseModel):
    error: HTTPErrorSchema


__all__ = ["ErrorEnvelope", "HTTPErrorSchema"]
