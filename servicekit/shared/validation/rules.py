# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Reusable field rules for request models.

    class CreateUser(BaseModel):
        name: Annotated[str, Required] = Field(json_schema_extra={"custom": "Nome"})
        email: Annotated[str, Required, Email]

Pydantic does not validate defaults, so a ``Required`` field must not declare
one; a field with a default is never checked when the key is absent.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

from .validation_types import ValidationErrorType


def check_required(value: Any) -> Any:
    if value is None or (isinstance(value, Sized) and len(value) == 0):
        raise PydanticCustomError(
            ValidationErrorType.REQUIRED.value,
            "Field is required",
            {},
        )
    return value


def check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise PydanticCustomError(
            ValidationErrorType.EMAIL.value,
            "Value is not a valid email address: {reason}",
            {"reason": str(exc)},
        ) from exc
    return value


Required = AfterValidator(check_required)
Email = AfterValidator(check_email)


__all__ = ["Email", "Required", "check_email", "check_required"]
