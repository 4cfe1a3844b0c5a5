"""Validation rules for request payloads."""

from .validators import (
    CompareFieldsValidation,
    RequiredFieldValidation,
    ValidationComposite,
    first_missing_field,
    first_non_string_field,
    make_signup_validation,
)

__all__ = [
    "CompareFieldsValidation",
    "RequiredFieldValidation",
    "ValidationComposite",
    "first_missing_field",
    "first_non_string_field",
    "make_signup_validation",
]
