# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""pt_BR messages keyed by pydantic error type.

``{field}`` is the display name of the failing field, every other
placeholder comes from the error's ``ctx``.
"""

from __future__ import annotations

from .validation_types import ValidationErrorType

PT_BR_MESSAGES: dict[str, str] = {
    "missing": "{field} é um campo obrigatório",
    ValidationErrorType.REQUIRED.value: "{field} é um campo obrigatório",
    ValidationErrorType.EMAIL.value: "{field} deve ser um endereço de e-mail válido",
    "string_type": "{field} deve ser um texto",
    "string_too_short": "{field} deve ter pelo menos {min_length} caracteres",
    "string_too_long": "{field} deve ter no máximo {max_length} caracteres",
    "string_pattern_mismatch": "{field} não possui um formato válido",
    "too_short": "{field} deve conter pelo menos {min_length} itens",
    "too_long": "{field} deve conter no máximo {max_length} itens",
    "int_type": "{field} deve ser um número inteiro",
    "int_parsing": "{field} deve ser um número inteiro",
    "int_from_float": "{field} deve ser um número inteiro",
    "float_type": "{field} deve ser um número",
    "float_parsing": "{field} deve ser um número",
    "bool_type": "{field} deve ser verdadeiro ou falso",
    "bool_parsing": "{field} deve ser verdadeiro ou falso",
    "greater_than": "{field} deve ser maior que {gt}",
    "greater_than_equal": "{field} deve ser {ge} ou maior",
    "less_than": "{field} deve ser menor que {lt}",
    "less_than_equal": "{field} deve ser {le} ou menor",
    "literal_error": "{field} deve ser um de {expected}",
    "enum": "{field} deve ser um de {expected}",
    "uuid_parsing": "{field} deve ser um UUID válido",
    "uuid_type": "{field} deve ser um UUID válido",
    "date_parsing": "{field} deve ser uma data válida",
    "datetime_parsing": "{field} deve ser uma data e hora válidas",
    "url_parsing": "{field} deve ser uma URL válida",
    "list_type": "{field} deve ser uma lista",
    "dict_type": "{field} deve ser um objeto",
    "model_type": "{field} deve ser um objeto",
    "extra_forbidden": "{field} não é permitido",
}


__all__ = ["PT_BR_MESSAGES"]
