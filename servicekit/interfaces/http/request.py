# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request body parsing for views."""

from __future__ import annotations

from typing import TypeVar

from flask import request
from pydantic import BaseModel
from werkzeug.exceptions import HTTPException

from servicekit.shared.errors import BAD_INPUT, REQUEST_VALIDATION, ValidationErrors, bad_request
from servicekit.shared.validation import Validator

_M = TypeVar("_M", bound=BaseModel)


def parse_request_body(model: type[_M], validator: Validator) -> _M:
    """Decode the JSON body of the current request into ``model``.

    A body that is not JSON raises a 400 ``bad-input`` error, a body that
    fails validation raises a 400 ``request-validation`` error carrying the
    translated field messages as details.
    """
    try:
        payload = request.get_json()
    except HTTPException as exc:
        raise bad_request("bad-input", BAD_INPUT.wrap_cause(exc)) from exc

    try:
        return validator.parse(model, payload)
    except ValidationErrors as exc:
        raise bad_request("request-validation", REQUEST_VALIDATION.wrap_cause(exc)) from exc


__all__ = ["parse_request_body"]
