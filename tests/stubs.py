"""
Stub collaborators satisfying the handler and use-case ports.

Each stub returns the canonical success value; tests override single
methods with unittest.mock where a different behavior is needed.
"""

import uuid
from typing import Any

from src.domain.exceptions import ParamError
from src.domain.models import Account, AddAccountModel, AuthenticationModel, AuthResult


class EmailValidatorStub:
    def is_valid(self, email: str) -> bool:
        return True


class PasswordValidatorStub:
    def is_valid(self, password: str) -> bool:
        return True


class ValidationStub:
    def validate(self, input: Any) -> ParamError | None:
        return None


def make_fake_account() -> Account:
    return Account(id="any_id", name="any_name", email="any_email", password="any_password")


class AddAccountStub:
    async def add(self, account: AddAccountModel) -> Account | None:
        return make_fake_account()


class AuthenticationStub:
    async def auth(self, authentication: AuthenticationModel) -> AuthResult | None:
        return AuthResult(name="any_name", access_token="any_token")


class InMemoryAccountRepository:
    """AccountRepository keeping accounts in a dict keyed by email."""

    def __init__(self) -> None:
        self.accounts: dict[str, Account] = {}

    async def add(self, name: str, email: str, password_hash: str) -> Account | None:
        if email in self.accounts:
            return None
        account = Account(id=str(uuid.uuid4()), name=name, email=email, password=password_hash)
        self.accounts[email] = account
        return account

    async def load_by_email(self, email: str) -> Account | None:
        return self.accounts.get(email)


class FixedTokenGenerator:
    def __init__(self, token: str = "any_token") -> None:
        self.token = token
        self.subjects: list[str] = []

    def generate(self, subject: str) -> str:
        self.subjects.append(subject)
        return self.token
