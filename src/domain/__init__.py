"""
Domain layer - Business logic with zero web framework imports.

This package contains the account registration and authentication
use-cases, the value objects they exchange, and the port interfaces
that adapters implement.
"""

from .accounts import DbAddAccount, DbAuthentication
from .exceptions import (
    EmailInUseError,
    HandlerError,
    InvalidParamError,
    MissingParamError,
    ParamError,
    ServerError,
)
from .models import Account, AddAccountModel, AuthenticationModel, AuthResult
from .ports import (
    AccountRepository,
    AddAccount,
    Authentication,
    EmailValidator,
    PasswordValidator,
    TokenGenerator,
    Validation,
)

__all__ = [
    "Account",
    "AccountRepository",
    "AddAccount",
    "AddAccountModel",
    "Authentication",
    "AuthenticationModel",
    "AuthResult",
    "DbAddAccount",
    "DbAuthentication",
    "EmailInUseError",
    "EmailValidator",
    "HandlerError",
    "InvalidParamError",
    "MissingParamError",
    "ParamError",
    "PasswordValidator",
    "ServerError",
    "TokenGenerator",
    "Validation",
]
