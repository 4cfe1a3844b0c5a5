"""
Account use-cases - Registration and credential verification.

This module contains the business operations the request handlers
delegate to:

- DbAddAccount: hash the password and atomically persist a new account.
  A conflicting email is an expected outcome and yields None.
- DbAuthentication: verify an email/password pair and issue an access
  token. Invalid credentials are an expected outcome and yield None.

Both normalize the email (strip + lowercase) so that registration and
login agree on the lookup key.

Timing: authentication always runs one bcrypt comparison, against a
dummy hash when the account does not exist, so response time does not
reveal whether an email is registered. The dummy hash uses the same cost
factor as real hashes.

bcrypt runs in a worker thread (asyncio.to_thread) so hashing never
blocks the event loop serving other requests.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import lru_cache

import bcrypt

from .models import Account, AddAccountModel, AuthenticationModel, AuthResult
from .ports import AccountRepository, TokenGenerator

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes and newer releases reject longer input.
_BCRYPT_MAX_BYTES = 72


@lru_cache
def _dummy_hash(rounds: int) -> bytes:
    """bcrypt hash of a throwaway password, one per cost factor."""
    return bcrypt.hashpw(b"dummy_password_for_timing_safety", bcrypt.gensalt(rounds=rounds))


def normalize_email(email: str) -> str:
    """Applies: strip whitespace + lowercase."""
    return email.strip().lower()


@dataclass
class DbAddAccount:
    """
    Account registration use-case.

    Implements the AddAccount port on top of an AccountRepository.
    """

    repository: AccountRepository
    bcrypt_cost: int = 10

    async def add(self, account: AddAccountModel) -> Account | None:
        """
        Register a new account.

        Args:
            account: Name, email (will be normalized) and plaintext password

        Returns:
            The created Account, or None if the email is already registered
        """
        email = normalize_email(account.email)
        password_hash = await asyncio.to_thread(self._hash_password, account.password)

        created = await self.repository.add(account.name, email, password_hash)
        if created is None:
            logger.info("Registration refused, email already in use")
        return created

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with cost factor >= 10."""
        rounds = max(self.bcrypt_cost, 10)
        return bcrypt.hashpw(
            password.encode()[:_BCRYPT_MAX_BYTES], bcrypt.gensalt(rounds=rounds)
        ).decode()


@dataclass
class DbAuthentication:
    """
    Credential verification use-case.

    Implements the Authentication port on top of an AccountRepository
    and a TokenGenerator.
    """

    repository: AccountRepository
    token_generator: TokenGenerator
    bcrypt_cost: int = 10

    async def auth(self, authentication: AuthenticationModel) -> AuthResult | None:
        """
        Verify credentials and issue an access token.

        Args:
            authentication: Email (will be normalized) and plaintext password

        Returns:
            AuthResult with the account name and a fresh token, or None if
            the email is unknown or the password does not match
        """
        email = normalize_email(authentication.email)
        account = await self.repository.load_by_email(email)

        if account is not None:
            stored_hash = account.password.encode()
        else:
            stored_hash = await asyncio.to_thread(_dummy_hash, max(self.bcrypt_cost, 10))
        password_valid = await asyncio.to_thread(
            bcrypt.checkpw, authentication.password.encode()[:_BCRYPT_MAX_BYTES], stored_hash
        )

        if account is None or not password_valid:
            logger.info("Authentication failed")
            return None

        access_token = self.token_generator.generate(account.id)
        return AuthResult(name=account.name, access_token=access_token)
