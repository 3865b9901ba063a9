# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Sentinel error to HTTP response mapping.

A registry is filled once at startup and only read afterwards::

    registry = (
        ErrorRegistry()
        .add(USER_NOT_FOUND, "ERR-N001", HTTPStatus.NOT_FOUND)
        .add(EMAIL_TAKEN, "ERR-B002", HTTPStatus.CONFLICT)
    )
"""

from __future__ import annotations

import dataclasses
from http import HTTPStatus

from .base import DomainError, HTTPError, ValidationErrors, find_error
from .http import coerce


class ErrorRegistry:
    def __init__(self) -> None:
        # id(sentinel) -> (sentinel, template); exceptions need not be hashable
        self._templates: dict[int, tuple[BaseException, HTTPError]] = {}

    def add(
        self,
        error: BaseException,
        code: str,
        status: int = HTTPStatus.INTERNAL_SERVER_ERROR,
    ) -> ErrorRegistry:
        if not code:
            return self
        message = error.message if isinstance(error, DomainError) else str(error)
        self._templates[id(error)] = (error, HTTPError(status=status, slug=code, message=message))
        return self

    def __contains__(self, error: BaseException) -> bool:
        return self._lookup(error) is not None

    def __len__(self) -> int:
        return len(self._templates)

    def _lookup(self, error: BaseException) -> HTTPError | None:
        entry = self._templates.get(id(error))
        if entry is None and isinstance(error, DomainError):
            entry = self._templates.get(id(error.root))
        return entry[1] if entry is not None else None

    @staticmethod
    def _message(error: BaseException, template: HTTPError) -> str:
        if isinstance(error, DomainError):
            return error.message
        return template.message

    def _search(self, error: BaseException) -> tuple[HTTPError, str] | None:
        template = self._lookup(error)
        if template is not None:
            return template, self._message(error, template)

        if isinstance(error, BaseExceptionGroup):
            members = list(error.exceptions)
            for index, member in enumerate(members):
                template = self._lookup(member)
                if template is not None:
                    rest = "; ".join(str(other) for other in members[index + 1 :])
                    message = self._message(member, template)
                    if rest:
                        message = f"{message}: {rest}"
                    return template, message
            for member in members:
                found = self._search(member)
                if found is not None:
                    return found

        if error.__cause__ is not None:
            found = self._search(error.__cause__)
            if found is not None:
                return found[0], str(error)
        return None

    def get(self, error: BaseException) -> HTTPError:
        """Resolve ``error`` to a response, first registered match wins."""
        if isinstance(error, HTTPError):
            return error

        found = self._search(error)
        if found is None:
            return coerce(error)

        template, message = found
        validations = find_error(error, ValidationErrors)
        return dataclasses.replace(
            template,
            message=message,
            details=validations.validations if validations is not None else None,
            cause=str(error),
        )


__all__ = ["ErrorRegistry"]
