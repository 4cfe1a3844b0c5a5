"""
Request validation rules.

first_missing_field() is the structural presence check the handlers run
before anything else. The Validation classes are composable rules that
satisfy the Validation port; ValidationComposite runs them in order and
stops at the first error.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from src.domain.exceptions import InvalidParamError, MissingParamError, ParamError
from src.domain.ports import Validation


def first_missing_field(body: Any, fields: Iterable[str]) -> str | None:
    """
    Return the first field, in declared order, that is absent or empty.

    A body that is not a mapping has no fields at all.
    """
    if not isinstance(body, Mapping):
        body = {}
    for field in fields:
        if not body.get(field):
            return field
    return None


def first_non_string_field(body: Mapping[str, Any], fields: Iterable[str]) -> str | None:
    """Return the first field, in declared order, whose value is not a string."""
    for field in fields:
        if not isinstance(body[field], str):
            return field
    return None


@dataclass(frozen=True)
class RequiredFieldValidation:
    field: str

    def validate(self, input: Mapping[str, Any]) -> ParamError | None:
        if first_missing_field(input, (self.field,)) is not None:
            return MissingParamError(self.field)
        return None


@dataclass(frozen=True)
class CompareFieldsValidation:
    """Reports field_to_compare as invalid when it differs from field."""

    field: str
    field_to_compare: str

    def validate(self, input: Mapping[str, Any]) -> ParamError | None:
        if input.get(self.field) != input.get(self.field_to_compare):
            return InvalidParamError(self.field_to_compare)
        return None


@dataclass(frozen=True)
class ValidationComposite:
    validations: Sequence[Validation]

    def validate(self, input: Mapping[str, Any]) -> ParamError | None:
        for validation in self.validations:
            error = validation.validate(input)
            if error is not None:
                return error
        return None


def make_signup_validation() -> ValidationComposite:
    """Build the sign-up validation chain: required fields, then confirmation."""
    validations: list[Validation] = [
        RequiredFieldValidation(field)
        for field in ("name", "email", "password", "passwordConfirmation")
    ]
    validations.append(CompareFieldsValidation("password", "passwordConfirmation"))
    return ValidationComposite(validations)
