"""
API routes - Sign-up and login endpoints.

This module defines the HTTP endpoints:
- POST /signup - Register an account and receive an access token
- POST /login - Exchange credentials for an access token

Routes only translate between HTTP and the framework-independent
handlers; every decision is made by the handler.
"""

from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, Response

from src.api.dependencies import get_login_handler, get_signup_handler
from src.api.models import AuthResponse, ErrorResponse
from src.handlers.http import HttpRequest, HttpResponse
from src.handlers.login import LoginHandler
from src.handlers.signup import SignUpHandler

router = APIRouter(tags=["auth"])


def to_request(payload: Any) -> HttpRequest:
    """Wrap a decoded JSON body; anything but an object counts as empty."""
    return HttpRequest(body=payload if isinstance(payload, Mapping) else {})


def to_response(http_response: HttpResponse) -> Response:
    """Serialize a handler response. A None body yields an empty response."""
    if http_response.body is None:
        return Response(status_code=http_response.status_code)
    return JSONResponse(status_code=http_response.status_code, content=http_response.body)


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
        401: {"description": "Authentication failed"},
        403: {"model": ErrorResponse, "description": "Email already in use"},
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
    summary="Register a new account",
    description="Submit name, email, password and passwordConfirmation. "
    "On success the new user is logged in and an access token is returned.",
)
async def signup(
    payload: Any = Body(default=None),
    handler: SignUpHandler = Depends(get_signup_handler),
) -> Response:
    """
    Register a new account.

    - **name**: Display name
    - **email**: Valid email address
    - **password**: Password (minimum 8 characters)
    - **passwordConfirmation**: Must equal password
    """
    return to_response(await handler.handle(to_request(payload)))


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
        401: {"description": "Invalid credentials"},
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
    summary="Log in with email and password",
    description="Submit email and password to receive an access token.",
)
async def login(
    payload: Any = Body(default=None),
    handler: LoginHandler = Depends(get_login_handler),
) -> Response:
    """
    Log in.

    - **email**: Registered email address
    - **password**: Account password
    """
    return to_response(await handler.handle(to_request(payload)))
