"""
Unit tests for API routes.

Tests HTTP serialization of handler responses with mocked handlers.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.dependencies import get_login_handler, get_signup_handler
from src.api.routes import router
from src.domain.exceptions import EmailInUseError, MissingParamError
from src.domain.models import AuthResult
from src.handlers.http import HttpRequest, bad_request, forbidden, ok, server_error, unauthorized
from src.handlers.login import LoginHandler
from src.handlers.signup import SignUpHandler


@pytest.fixture
def app() -> FastAPI:
    """Create test FastAPI application."""
    test_app = FastAPI()
    test_app.include_router(router)

    # Mock the app.state.pool for dependency injection
    test_app.state.pool = MagicMock()

    return test_app


def mock_handler(spec: type, response) -> MagicMock:
    handler = MagicMock(spec=spec)
    handler.handle = AsyncMock(return_value=response)
    return handler


class TestSignupEndpoint:
    """Tests for POST /signup endpoint."""

    def test_success_returns_200_with_token(self, app: FastAPI) -> None:
        handler = mock_handler(SignUpHandler, ok(AuthResult(name="Ada", access_token="T")))
        app.dependency_overrides[get_signup_handler] = lambda: handler
        client = TestClient(app)

        try:
            body = {
                "name": "Ada",
                "email": "ada@mail.com",
                "password": "secret123",
                "passwordConfirmation": "secret123",
            }
            response = client.post("/signup", json=body)

            assert response.status_code == 200
            assert response.json() == {"name": "Ada", "accessToken": "T"}
            handler.handle.assert_awaited_once_with(HttpRequest(body=body))
        finally:
            app.dependency_overrides.clear()

    def test_missing_field_returns_400_not_422(self, app: FastAPI) -> None:
        """Incomplete bodies reach the handler instead of failing framework validation."""
        handler = mock_handler(SignUpHandler, bad_request(MissingParamError("name")))
        app.dependency_overrides[get_signup_handler] = lambda: handler
        client = TestClient(app)

        try:
            response = client.post("/signup", json={"email": "ada@mail.com"})

            assert response.status_code == 400
            assert response.json() == {"kind": "MissingParam", "field": "name"}
        finally:
            app.dependency_overrides.clear()

    def test_conflict_returns_403(self, app: FastAPI) -> None:
        handler = mock_handler(SignUpHandler, forbidden(EmailInUseError()))
        app.dependency_overrides[get_signup_handler] = lambda: handler
        client = TestClient(app)

        try:
            response = client.post("/signup", json={})

            assert response.status_code == 403
            assert response.json() == {"kind": "EmailInUse"}
        finally:
            app.dependency_overrides.clear()

    def test_server_error_returns_500(self, app: FastAPI) -> None:
        handler = mock_handler(SignUpHandler, server_error())
        app.dependency_overrides[get_signup_handler] = lambda: handler
        client = TestClient(app)

        try:
            response = client.post("/signup", json={})

            assert response.status_code == 500
            assert response.json() == {"kind": "ServerError"}
        finally:
            app.dependency_overrides.clear()

    @pytest.mark.parametrize("payload", [["a", "b"], "text", 42])
    def test_non_object_body_is_treated_as_empty(self, app: FastAPI, payload) -> None:
        handler = mock_handler(SignUpHandler, bad_request(MissingParamError("name")))
        app.dependency_overrides[get_signup_handler] = lambda: handler
        client = TestClient(app)

        try:
            client.post("/signup", json=payload)

            handler.handle.assert_awaited_once_with(HttpRequest(body={}))
        finally:
            app.dependency_overrides.clear()

    def test_no_body_is_treated_as_empty(self, app: FastAPI) -> None:
        handler = mock_handler(SignUpHandler, bad_request(MissingParamError("name")))
        app.dependency_overrides[get_signup_handler] = lambda: handler
        client = TestClient(app)

        try:
            response = client.post("/signup")

            assert response.status_code == 400
            handler.handle.assert_awaited_once_with(HttpRequest(body={}))
        finally:
            app.dependency_overrides.clear()


class TestLoginEndpoint:
    """Tests for POST /login endpoint."""

    def test_success_returns_200_with_token(self, app: FastAPI) -> None:
        handler = mock_handler(LoginHandler, ok(AuthResult(name="A", access_token="T")))
        app.dependency_overrides[get_login_handler] = lambda: handler
        client = TestClient(app)

        try:
            response = client.post("/login", json={"email": "a@x.com", "password": "p"})

            assert response.status_code == 200
            assert response.json() == {"name": "A", "accessToken": "T"}
            handler.handle.assert_awaited_once_with(
                HttpRequest(body={"email": "a@x.com", "password": "p"})
            )
        finally:
            app.dependency_overrides.clear()

    def test_unauthorized_returns_401_with_empty_body(self, app: FastAPI) -> None:
        handler = mock_handler(LoginHandler, unauthorized())
        app.dependency_overrides[get_login_handler] = lambda: handler
        client = TestClient(app)

        try:
            response = client.post("/login", json={"email": "a@x.com", "password": "p"})

            assert response.status_code == 401
            assert response.content == b""
        finally:
            app.dependency_overrides.clear()

    def test_bad_request_returns_400(self, app: FastAPI) -> None:
        handler = mock_handler(LoginHandler, bad_request(MissingParamError("password")))
        app.dependency_overrides[get_login_handler] = lambda: handler
        client = TestClient(app)

        try:
            response = client.post("/login", json={"email": "a@x.com"})

            assert response.status_code == 400
            assert response.json() == {"kind": "MissingParam", "field": "password"}
        finally:
            app.dependency_overrides.clear()
