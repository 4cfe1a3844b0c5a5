"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Canonical sign-up and login requests
- An in-memory AccountRepository for flows that need no database
"""

import pytest

from src.handlers.http import HttpRequest
from tests.stubs import InMemoryAccountRepository


@pytest.fixture
def signup_request() -> HttpRequest:
    """Valid sign-up request."""
    return HttpRequest(
        body={
            "name": "valid_name",
            "email": "valid_email@mail.com",
            "password": "valid_password",
            "passwordConfirmation": "valid_password",
        }
    )


@pytest.fixture
def login_request() -> HttpRequest:
    """Valid login request."""
    return HttpRequest(body={"email": "any_email@mail.com", "password": "any_password"})


@pytest.fixture
def memory_repository() -> InMemoryAccountRepository:
    """Empty in-memory account repository."""
    return InMemoryAccountRepository()
