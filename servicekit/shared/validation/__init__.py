from .rules import Email, Required, check_email, check_required
from .translations import PT_BR_MESSAGES
from .validation_types import ValidationErrorType
from .validator import (
    CUSTOM_NAME_KEY,
    UNKNOWN_VALIDATION_MESSAGE,
    Validator,
    field_display_name,
    translate_error,
)

__all__ = [
    "CUSTOM_NAME_KEY",
    "PT_BR_MESSAGES",
    "UNKNOWN_VALIDATION_MESSAGE",
    "Email",
    "Required",
    "ValidationErrorType",
    "Validator",
    "check_email",
    "check_required",
    "field_display_name",
    "translate_error",
]
