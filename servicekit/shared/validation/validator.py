# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Model validation with translated, field-level messages.

Rules are ordinary pydantic constraints plus the annotated rules from
``servicekit.shared.validation.rules``. Every failure becomes one pt_BR
message in a ``ValidationErrors``; the field is named after the ``custom``
entry of its ``json_schema_extra`` or, failing that, its declared name.
Nested models and list indexes are collapsed to the leaf field name.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, TypeVar, get_args

from pydantic import BaseModel, PydanticUserError
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo
from pydantic_core import ErrorDetails

from servicekit.shared.errors import DEFAULT_VALIDATION_MESSAGE, ValidationErrors

from .translations import PT_BR_MESSAGES

UNKNOWN_VALIDATION_MESSAGE = "unknown validation error"
CUSTOM_NAME_KEY = "custom"

_M = TypeVar("_M", bound=BaseModel)


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        model = _nested_model(arg)
        if model is not None:
            return model
    return None


def _find_field(model: type[BaseModel], name: str) -> FieldInfo | None:
    fields = model.model_fields
    if name in fields:
        return fields[name]
    for info in fields.values():
        if info.alias == name or info.validation_alias == name:
            return info
    return None


def _display_name(info: FieldInfo | None, fallback: str) -> str:
    if info is not None and isinstance(info.json_schema_extra, dict):
        custom = info.json_schema_extra.get(CUSTOM_NAME_KEY)
        if custom:
            return str(custom)
    return fallback


def field_display_name(model: type[BaseModel], loc: tuple[int | str, ...]) -> str:
    """Return the display name of the leaf field addressed by ``loc``."""
    current: type[BaseModel] | None = model
    info: FieldInfo | None = None
    leaf = ""
    for part in loc:
        if isinstance(part, int):
            continue
        leaf = part
        info = _find_field(current, part) if current is not None else None
        current = _nested_model(info.annotation) if info is not None else None
    return _display_name(info, leaf)


def translate_error(
    error: ErrorDetails,
    model: type[BaseModel],
    messages: Mapping[str, str] = PT_BR_MESSAGES,
) -> str:
    loc = tuple(error.get("loc", ()))
    if not loc:
        return error["msg"]

    field_name = field_display_name(model, loc)
    template = messages.get(error["type"])
    if template is None:
        return f"{field_name}: {error['msg']}"
    try:
        return template.format(field=field_name, **error.get("ctx", {}))
    except (KeyError, IndexError):
        return f"{field_name}: {error['msg']}"


class Validator:
    """Validates pydantic models and reports translated failures.

    Stateless after construction, one instance can be shared by the whole
    process.
    """

    def __init__(
        self,
        messages: Mapping[str, str] | None = None,
        *,
        summary: str = DEFAULT_VALIDATION_MESSAGE,
    ) -> None:
        self._messages = {**PT_BR_MESSAGES, **(messages or {})}
        self._summary = summary

    def _run(
        self, model: type[_M] | BaseModel, data: Any
    ) -> tuple[BaseModel | None, ValidationErrors | None]:
        if isinstance(model, BaseModel):
            if data is not None:
                raise TypeError("data must not be given when validating a model instance")
            model_cls: type[BaseModel] = type(model)
            data = model.model_dump(by_alias=True)
        else:
            model_cls = model

        try:
            return model_cls.model_validate(data), None
        except PydanticValidationError as exc:
            validations = [
                translate_error(error, model_cls, self._messages) for error in exc.errors()
            ]
            return None, ValidationErrors(self._summary, *validations)
        except PydanticUserError:
            return None, ValidationErrors(UNKNOWN_VALIDATION_MESSAGE)

    def validate(self, model: type[BaseModel] | BaseModel, data: Any = None) -> ValidationErrors | None:
        """Return the failures for ``data`` against ``model``, ``None`` when valid.

        ``model`` may also be an instance, in which case its own values are
        checked again and ``data`` must be left out.
        """
        _, errors = self._run(model, data)
        return errors

    def parse(self, model: type[_M], data: Any) -> _M:
        instance, errors = self._run(model, data)
        if errors is not None:
            raise errors
        return instance  # type: ignore[return-value]


__all__ = [
    "CUSTOM_NAME_KEY",
    "UNKNOWN_VALIDATION_MESSAGE",
    "Validator",
    "field_display_name",
    "translate_error",
]
