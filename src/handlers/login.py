"""Login handler - Verifies credentials and returns an access token."""

import logging
from dataclasses import dataclass

from src.domain.exceptions import InvalidParamError, MissingParamError
from src.domain.models import AuthenticationModel
from src.domain.ports import Authentication, EmailValidator
from src.handlers.http import (
    HttpRequest,
    HttpResponse,
    bad_request,
    ok,
    server_error,
    unauthorized,
)
from src.validation import first_missing_field, first_non_string_field

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("email", "password")


@dataclass
class LoginHandler:
    """Handles POST /login."""

    authentication: Authentication
    email_validator: EmailValidator

    async def handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body
        missing = first_missing_field(body, REQUIRED_FIELDS)
        if missing is not None:
            return bad_request(MissingParamError(missing))

        wrong_type = first_non_string_field(body, REQUIRED_FIELDS)
        if wrong_type is not None:
            return bad_request(InvalidParamError(wrong_type))

        email = body["email"]
        password = body["password"]

        try:
            if not self.email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            result = await self.authentication.auth(
                AuthenticationModel(email=email, password=password)
            )
        except Exception:
            logger.exception("Login failed with an unexpected error")
            return server_error()

        # Generic 401 regardless of which factor failed
        if result is None:
            return unauthorized()
        return ok(result)
