"""
HTTP protocol types and response helpers.

Every handler outcome maps to exactly one helper here:

    bad_request(error)  -> 400 {kind, field}
    unauthorized()      -> 401 (empty body)
    forbidden(error)    -> 403 {kind}
    server_error()      -> 500 {kind: "ServerError"}
    ok(result)          -> 200 {name, accessToken}

The helpers are pure and cannot fail.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from src.domain.exceptions import HandlerError, ServerError
from src.domain.models import AuthResult


@dataclass(frozen=True)
class HttpRequest:
    """Untyped request payload handed over by the transport layer."""

    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Status code and JSON-serializable body (None means no body)."""

    status_code: int
    body: Any = None


class Handler(Protocol):
    """A single endpoint's request-to-response transformation."""

    async def handle(self, request: HttpRequest) -> HttpResponse: ...


def bad_request(error: HandlerError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error.to_dict())


def unauthorized() -> HttpResponse:
    return HttpResponse(status_code=401)


def forbidden(error: HandlerError) -> HttpResponse:
    return HttpResponse(status_code=403, body=error.to_dict())


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError().to_dict())


def ok(result: AuthResult) -> HttpResponse:
    return HttpResponse(status_code=200, body=result.to_dict())
