"""
Port interfaces - Protocol definitions for collaborators.

This module defines the interfaces (ports) the request handlers and
use-cases depend on. Adapters implement these protocols through
structural subtyping; tests provide fakes satisfying the same contracts.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from src.domain.models import Account, AddAccountModel, AuthenticationModel, AuthResult
from src.domain.exceptions import ParamError


class EmailValidator(Protocol):
    """Port interface for email syntax checks."""

    def is_valid(self, email: str) -> bool:
        """Return True if email is syntactically valid. May raise on internal failure."""
        ...


class PasswordValidator(Protocol):
    """Port interface for password policy checks."""

    def is_valid(self, password: str) -> bool:
        """Return True if password satisfies the policy. May raise on internal failure."""
        ...


class Validation(Protocol):
    """Port interface for a validation rule or an ordered chain of rules."""

    def validate(self, input: Mapping[str, Any]) -> ParamError | None:
        """Return the first failing rule's error, or None."""
        ...


class AddAccount(Protocol):
    """Port interface for the account registration use-case."""

    async def add(self, account: AddAccountModel) -> Account | None:
        """
        Persist a new account.

        Returns:
            The created Account, or None if the email is already registered
        """
        ...


class Authentication(Protocol):
    """Port interface for the credential verification use-case."""

    async def auth(self, authentication: AuthenticationModel) -> AuthResult | None:
        """
        Verify credentials and issue an access token.

        Returns:
            AuthResult on success, None on invalid credentials
        """
        ...


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    async def add(self, name: str, email: str, password_hash: str) -> Account | None:
        """
        Atomically insert a new account.

        Args:
            name: Display name
            email: Normalized email address
            password_hash: bcrypt hashed password

        Returns:
            The created Account, or None if the email is already taken
        """
        ...

    async def load_by_email(self, email: str) -> Account | None:
        """Load an account by normalized email address, or None if not found."""
        ...


class TokenGenerator(Protocol):
    """Port interface for access token issuance."""

    def generate(self, subject: str) -> str:
        """Issue an access token for the given subject (account id)."""
        ...
