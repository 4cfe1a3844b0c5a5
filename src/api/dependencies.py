"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting request handlers,
use-cases and infrastructure adapters into routes.
"""

from fastapi import Depends, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.token.jwt_generator import JwtTokenGenerator
from src.adapters.validators import EmailValidatorAdapter, PasswordPolicyValidator
from src.config.settings import Settings, get_settings
from src.domain.accounts import DbAddAccount, DbAuthentication
from src.domain.ports import AccountRepository, AddAccount, Authentication
from src.handlers.login import LoginHandler
from src.handlers.signup import SignUpHandler
from src.validation import make_signup_validation

# Module-level singleton - EmailValidatorAdapter is stateless
_email_validator = EmailValidatorAdapter()


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> AccountRepository:
    """Create repository with connection pool from app state."""
    return PostgresAccountRepository(get_pool(request))


def get_email_validator() -> EmailValidatorAdapter:
    """Get email validator (singleton)."""
    return _email_validator


def get_password_validator(settings: Settings = Depends(get_settings)) -> PasswordPolicyValidator:
    return PasswordPolicyValidator(min_length=settings.password_min_length)


def get_token_generator(settings: Settings = Depends(get_settings)) -> JwtTokenGenerator:
    return JwtTokenGenerator(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.access_token_ttl_seconds,
    )


def get_add_account(
    repository: AccountRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> AddAccount:
    return DbAddAccount(repository=repository, bcrypt_cost=settings.bcrypt_cost)


def get_authentication(
    repository: AccountRepository = Depends(get_repository),
    token_generator: JwtTokenGenerator = Depends(get_token_generator),
    settings: Settings = Depends(get_settings),
) -> Authentication:
    return DbAuthentication(
        repository=repository,
        token_generator=token_generator,
        bcrypt_cost=settings.bcrypt_cost,
    )


def get_signup_handler(
    email_validator: EmailValidatorAdapter = Depends(get_email_validator),
    password_validator: PasswordPolicyValidator = Depends(get_password_validator),
    add_account: AddAccount = Depends(get_add_account),
    authentication: Authentication = Depends(get_authentication),
) -> SignUpHandler:
    """
    Create the sign-up handler with injected collaborators.

    Wires the format validators, the validation chain and both use-cases.
    """
    return SignUpHandler(
        email_validator=email_validator,
        add_account=add_account,
        password_validator=password_validator,
        authentication=authentication,
        validation=make_signup_validation(),
    )


def get_login_handler(
    authentication: Authentication = Depends(get_authentication),
    email_validator: EmailValidatorAdapter = Depends(get_email_validator),
) -> LoginHandler:
    """Create the login handler with injected collaborators."""
    return LoginHandler(authentication=authentication, email_validator=email_validator)
