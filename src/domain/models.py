"""
Domain models - Value objects exchanged between handlers and use-cases.

Accounts and authentication results are created exclusively by the
use-cases; handlers only pass them through.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AddAccountModel:
    """Input of the account registration use-case."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AuthenticationModel:
    """Input of the authentication use-case."""

    email: str
    password: str


@dataclass(frozen=True)
class Account:
    """Persisted account. `password` holds the bcrypt hash, never plaintext."""

    id: str
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AuthResult:
    """Successful credential check and the access token issued for it."""

    name: str
    access_token: str

    def to_dict(self) -> dict[str, Any]:
        """Wire representation: {name, accessToken}."""
        return {"name": self.name, "accessToken": self.access_token}
