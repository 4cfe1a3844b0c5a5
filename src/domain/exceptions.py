"""
Domain errors - Semantic error kinds returned by validators and handlers.

Errors are returned as values and mapped to responses; they are never
raised across the handler boundary. Each carries its kind and, where it
applies, the offending field name, and nothing else.
"""

from typing import Any


class HandlerError(Exception):
    """Base class for errors that end up in a response body."""

    kind = "Error"

    def __init__(self, field: str | None = None) -> None:
        super().__init__(field or self.kind)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        """Convert to the single-field error payload used in responses."""
        body: dict[str, Any] = {"kind": self.kind}
        if self.field is not None:
            body["field"] = self.field
        return body


class ParamError(HandlerError):
    """A request field failed validation."""

    def __init__(self, field: str) -> None:
        super().__init__(field)


class MissingParamError(ParamError):
    """Required field is absent or empty."""

    kind = "MissingParam"


class InvalidParamError(ParamError):
    """Field is present but fails a syntactic or semantic rule."""

    kind = "InvalidParam"


class EmailInUseError(HandlerError):
    """Email is already registered to another account."""

    kind = "EmailInUse"


class ServerError(HandlerError):
    """Unexpected failure. Carries no internal detail."""

    kind = "ServerError"
