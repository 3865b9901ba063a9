from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus

from werkzeug.exceptions import MethodNotAllowed, NotFound

from servicekit.shared.errors import (
    GENERIC_ERROR_MESSAGE,
    REQUEST_VALIDATION,
    UNAUTHORIZED,
    DomainError,
    ErrorRegistry,
    HTTPError,
    ValidationErrors,
    coerce,
    conflict,
    new_error,
)

USER_NOT_FOUND = new_error("ERR-N001", "user with ID %d not found")
EMAIL_TAKEN = new_error("ERR-B002", "email already registered")


def test_http_error_passes_through() -> None:
    error = conflict("email-taken", ValueError("email already registered"))
    assert coerce(error) is error


def test_http_error_found_in_chain() -> None:
    http_error = HTTPError(status=404, slug="user-not-found", message="user with ID 7 not found")
    try:
        raise RuntimeError("lookup failed") from http_error
    except RuntimeError as exc:
        assert coerce(exc) is http_error


def test_validation_errors_become_422() -> None:
    validations = ValidationErrors("validation failed", "Nome é um campo obrigatório")

    http_error = coerce(validations)

    assert http_error.status == HTTPStatus.UNPROCESSABLE_ENTITY
    assert http_error.slug == "VALIDATION"
    assert http_error.message == "validation failed"
    assert http_error.details == ["Nome é um campo obrigatório"]


def test_wrapped_validation_errors_keep_details() -> None:
    validations = ValidationErrors("validation failed", "a", "b")
    wrapped = REQUEST_VALIDATION.wrap_cause(validations)

    http_error = coerce(wrapped)

    assert http_error.status == 422
    assert http_error.details == ["a", "b"]
    assert http_error.cause == str(wrapped)


def test_domain_error_uses_code_and_message() -> None:
    error = USER_NOT_FOUND.with_args(7).wrap_cause(KeyError("users:7"))

    http_error = coerce(error)

    assert http_error.status == HTTPStatus.BAD_REQUEST
    assert http_error.slug == "ERR-N001"
    assert http_error.message == "user with ID 7 not found"
    assert http_error.cause == "'users:7'"
    assert http_error.details is None


def test_domain_error_status_chosen_by_caller() -> None:
    assert coerce(UNAUTHORIZED).status == 401
    assert coerce(USER_NOT_FOUND.with_args(1).with_status(404)).status == 404


def test_empty_domain_error_falls_back_to_unknown() -> None:
    http_error = coerce(DomainError(code="", message_format=""))

    assert http_error.slug == "unknown-error"
    assert http_error.status == 500
    assert http_error.message == GENERIC_ERROR_MESSAGE
    assert http_error.message


def test_routing_errors_keep_their_status() -> None:
    not_found = coerce(NotFound())
    assert not_found.status == 404
    assert not_found.slug == "not-found"

    not_allowed = coerce(MethodNotAllowed(valid_methods=["GET"]))
    assert not_allowed.status == 405
    assert not_allowed.slug == "method-not-allowed"


def test_unknown_error_does_not_leak() -> None:
    http_error = coerce(RuntimeError("connection refused: 10.0.0.3:5432"))

    assert http_error.status == 500
    assert http_error.slug == "unknown-error"
    assert http_error.message == GENERIC_ERROR_MESSAGE
    assert http_error.cause == "connection refused: 10.0.0.3:5432"
    assert "10.0.0.3" not in str(http_error.to_dict())


def _registry() -> ErrorRegistry:
    return (
        ErrorRegistry()
        .add(USER_NOT_FOUND, "ERR-N001", HTTPStatus.NOT_FOUND)
        .add(EMAIL_TAKEN, "ERR-B002", HTTPStatus.CONFLICT)
        .add(EMAIL_TAKEN, "")
    )


def test_registry_direct_match() -> None:
    registry = _registry()
    assert len(registry) == 2

    http_error = registry.get(EMAIL_TAKEN)

    assert http_error.status == 409
    assert http_error.slug == "ERR-B002"
    assert http_error.message == "email already registered"
    assert http_error.category == "business"


def test_registry_matches_derived_and_wrapped_errors() -> None:
    registry = _registry()
    derived = USER_NOT_FOUND.with_args(7)
    assert derived in registry

    try:
        raise LookupError("loading profile") from derived
    except LookupError as exc:
        http_error = registry.get(exc)

    assert http_error.status == 404
    assert http_error.slug == "ERR-N001"
    assert http_error.message == "loading profile"


def test_registry_first_group_member_wins() -> None:
    registry = _registry()
    group = ExceptionGroup(
        "signup failed",
        [ValueError("first"), EMAIL_TAKEN, ValueError("trailing reason")],
    )

    http_error = registry.get(group)

    assert http_error.slug == "ERR-B002"
    assert http_error.message == "email already registered: trailing reason"


def test_registry_unmatched_group_with_validations() -> None:
    registry = _registry()
    group = ExceptionGroup(
        "bad payload",
        [ValueError("other"), ValidationErrors("validation failed", "Nome é um campo obrigatório")],
    )

    http_error = registry.get(group)

    assert http_error.status == 422
    assert http_error.slug == "VALIDATION"
    assert http_error.details == ["Nome é um campo obrigatório"]


def test_registry_unmatched_error_is_internal() -> None:
    http_error = _registry().get(RuntimeError("boom"))
    assert http_error.status == 500
    assert http_error.slug == "unknown-error"


def test_registry_does_not_mutate_templates() -> None:
    registry = _registry()
    registry.get(ExceptionGroup("g", [EMAIL_TAKEN, ValueError("why")]))
    assert registry.get(EMAIL_TAKEN).message == "email already registered"


@dataclass
class QuotaExceeded(Exception):
    account: str


def test_registry_resolves_unhashable_errors() -> None:
    registry = _registry()
    error = QuotaExceeded("acme")

    assert error not in registry
    http_error = registry.get(error)

    assert http_error.status == 500
    assert http_error.slug == "unknown-error"


def test_routing_error_headers_are_kept() -> None:
    http_error = coerce(MethodNotAllowed(valid_methods=["GET", "POST"]))

    assert http_error.headers == {"Allow": "GET, POST"}
