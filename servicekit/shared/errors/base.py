# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, TypeVar

from .schemas import HTTPErrorSchema

UNKNOWN_ERROR_CODE = "unknown-error"
VALIDATION_ERROR_CODE = "VALIDATION"
DEFAULT_VALIDATION_MESSAGE = "validation failed"
GENERIC_ERROR_MESSAGE = "Ocorreu um erro inesperado. Tente novamente mais tarde."

_CATEGORIES = {
    "V": "validation",
    "B": "business",
    "N": "notfound",
    "R": "badrequest",
    "P": "permission",
    "A": "authentication",
    "I": "internal",
    "E": "external",
}

_E = TypeVar("_E", bound=BaseException)


def walk_error(error: BaseException | None) -> Iterator[BaseException]:
    """Yield ``error`` and every error it wraps, depth first.

    Explicit causes (``raise ... from``, ``DomainError.wrap_cause``) and the
    members of exception groups are followed. Each error is yielded once.
    """
    seen: set[int] = set()

    def _walk(current: BaseException | None) -> Iterator[BaseException]:
        if current is None or id(current) in seen:
            return
        seen.add(id(current))
        yield current
        if isinstance(current, BaseExceptionGroup):
            for member in current.exceptions:
                yield from _walk(member)
        yield from _walk(current.__cause__)

    yield from _walk(error)


def find_error(error: BaseException | None, kind: type[_E]) -> _E | None:
    for current in walk_error(error):
        if isinstance(current, kind):
            return current
    return None


def is_error(error: BaseException | None, target: BaseException) -> bool:
    for current in walk_error(error):
        if current is target:
            return True
        if isinstance(current, DomainError) and current.root is target:
            return True
    return False


def error_category(code: str) -> str:
    # codes look like ERR-V001, the fifth character names the category
    if len(code) < 5:
        return "unknown"
    return _CATEGORIES.get(code[4], "unknown")


class ValidationErrors(Exception):
    """Summary message plus the ordered list of validation failures."""

    def __init__(self, message: str = DEFAULT_VALIDATION_MESSAGE, *validations: str) -> None:
        super().__init__(message)
        self.message = message
        self._validations: list[str] = list(validations)

    @property
    def validations(self) -> list[str]:
        return list(self._validations)

    def add(self, *validations: str) -> ValidationErrors:
        self._validations.extend(validations)
        return self

    def add_field(self, field_name: str, message: str) -> ValidationErrors:
        return self.add(f"{field_name} {message}")

    def has_validations(self) -> bool:
        return len(self._validations) > 0

    def has_no_validations(self) -> bool:
        return len(self._validations) == 0

    def error_or_none(self) -> ValidationErrors | None:
        if self.has_validations():
            return self
        return None

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ValidationErrors({self.message!r}, validations={self._validations!r})"


@dataclass(slots=True, eq=False)
class DomainError(Exception):
    """Code-tagged error with a printf-style message.

    Instances are treated as values: the ``with_*`` builders and
    ``wrap_cause`` return a new error that still identifies as the sentinel
    it was derived from (see ``is_error``).
    """

    code: str
    message_format: str
    format_args: tuple[Any, ...] = ()
    details: tuple[str, ...] = ()
    cause: BaseException | None = None
    status: int | None = None
    origin: DomainError | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.format_args = tuple(self.format_args)
        self.details = tuple(self.details)
        Exception.__init__(self, self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    @property
    def root(self) -> DomainError:
        return self.origin or self

    @property
    def message(self) -> str:
        if not self.format_args:
            return self.message_format
        try:
            return self.message_format % self.format_args
        except (TypeError, ValueError):
            # format and args disagree, keep both readable
            extra = " ".join(str(arg) for arg in self.format_args)
            return f"{self.message_format} {extra}"

    def cause_message(self) -> str:
        if self.cause is None:
            return ""
        return str(self.cause)

    def _derive(self, **changes: Any) -> DomainError:
        return dataclasses.replace(self, origin=self.root, **changes)

    def with_args(self, *args: Any) -> DomainError:
        return self._derive(format_args=self.format_args + args)

    def with_details(self, details: Iterable[str]) -> DomainError:
        return self._derive(details=tuple(details))

    def with_status(self, status: int) -> DomainError:
        return self._derive(status=status)

    def wrap_cause(self, cause: BaseException) -> DomainError:
        validations = find_error(cause, ValidationErrors)
        if validations is not None:
            return self._derive(cause=cause, details=tuple(validations.validations))
        return self._derive(cause=cause)

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


def new_error(code: str, message_format: str, *args: Any, status: int | None = None) -> DomainError:
    return DomainError(code=code, message_format=message_format, format_args=args, status=status)


BAD_INPUT = new_error(
    "BAD_INPUT",
    "Algo deu errado com os dados informados. Verifique e tente novamente.",
)
REQUEST_VALIDATION = new_error(
    "REQUEST_VALIDATION",
    "Não foi possível concluir requisição. Verifique os dados informados e tente novamente.",
)
ACTION_DENIED = new_error(
    "ACTION_DENIED",
    "Você não tem permissão para realizar esta ação. Se precisar de acesso, contate o administrador.",
    status=HTTPStatus.FORBIDDEN,
)
UNAUTHORIZED = new_error(
    "UNAUTHORIZED",
    "Você não tem autorização para acessar este recurso.",
    status=HTTPStatus.UNAUTHORIZED,
)


@dataclass(slots=True, eq=False)
class HTTPError(Exception):
    """Presentation-layer error written to clients as the ``error`` envelope.

    ``cause`` holds the operator-facing text of the source error and is never
    serialized. ``headers`` are added to the response as is (``Allow`` on a
    405, for instance).
    """

    status: int
    slug: str
    message: str
    details: list[str] | None = None
    cause: str = ""
    headers: dict[str, str] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.status:
            self.status = HTTPStatus.INTERNAL_SERVER_ERROR
        self.status = int(self.status)
        if not self.slug:
            self.slug = UNKNOWN_ERROR_CODE
        self.details = list(self.details) if self.details else None
        self.headers = dict(self.headers) if self.headers else None
        Exception.__init__(self, self.message)

    @property
    def category(self) -> str:
        return error_category(self.slug)

    def with_status(self, status: int) -> HTTPError:
        return dataclasses.replace(self, status=status)

    def with_details(self, details: Iterable[str]) -> HTTPError:
        return dataclasses.replace(self, details=list(details))

    def describe(self) -> str:
        if self.details:
            return f"[{self.slug}] {self.message} ({','.join(self.details)})"
        return f"[{self.slug}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        schema = HTTPErrorSchema(
            code=self.slug,
            message=self.message,
            details=self.details,
            status_code=self.status,
        )
        return schema.model_dump(exclude_none=True)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> HTTPError:
        schema = HTTPErrorSchema.model_validate(payload)
        return cls(
            status=schema.status_code,
            slug=schema.code,
            message=schema.message,
            details=schema.details,
        )

    def __str__(self) -> str:
        return self.message


def new_http_error(status: int, slug: str, error: BaseException | None = None) -> HTTPError:
    if error is None:
        error = Exception("unknown error")
    validations = find_error(error, ValidationErrors)
    http_error = HTTPError(
        status=status,
        slug=slug,
        message=str(error),
        details=validations.validations if validations is not None else None,
        cause=str(error),
    )
    http_error.__cause__ = error
    return http_error


def internal_server_error(error: BaseException | None = None) -> HTTPError:
    http_error = HTTPError(
        status=HTTPStatus.INTERNAL_SERVER_ERROR,
        slug=UNKNOWN_ERROR_CODE,
        message=GENERIC_ERROR_MESSAGE,
        cause=str(error) if error is not None else "",
    )
    http_error.__cause__ = error
    return http_error


def unauthorized(error: BaseException | None = None) -> HTTPError:
    return new_http_error(HTTPStatus.UNAUTHORIZED, "unauthorized", error)


def forbidden(slug: str, error: BaseException | None = None) -> HTTPError:
    return new_http_error(HTTPStatus.FORBIDDEN, slug, error)


def bad_request(slug: str, error: BaseException | None = None) -> HTTPError:
    return new_http_error(HTTPStatus.BAD_REQUEST, slug, error)


def unprocessable_entity(slug: str, error: BaseException | None = None) -> HTTPError:
    return new_http_error(HTTPStatus.UNPROCESSABLE_ENTITY, slug, error)


def conflict(slug: str, error: BaseException | None = None) -> HTTPError:
    return new_http_error(HTTPStatus.CONFLICT, slug, error)


def not_found(slug: str, error: BaseException | None = None) -> HTTPError:
    return new_http_error(HTTPStatus.NOT_FOUND, slug, error)
