"""Validator adapters - Implementations of the format validator ports."""

from .email import EmailValidatorAdapter
from .password import PasswordPolicyValidator

__all__ = ["EmailValidatorAdapter", "PasswordPolicyValidator"]
