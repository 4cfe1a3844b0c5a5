"""
Sign-up handler - Registers an account and logs the new user in.

Validation order is significant:
1. Presence of every required field (first missing wins), then string type
2. Validation chain over the raw body
3. password == passwordConfirmation
4. Email syntax
5. Password policy
6. Account creation (an already registered email becomes 403 EmailInUse)
7. Authentication of the freshly created account

Structural checks precede format checks, format checks precede any
use-case call, and account creation precedes authentication. Each
use-case is invoked at most once per request.
"""

import logging
from dataclasses import dataclass

from src.domain.exceptions import EmailInUseError, InvalidParamError, MissingParamError
from src.domain.models import AddAccountModel, AuthenticationModel
from src.domain.ports import (
    AddAccount,
    Authentication,
    EmailValidator,
    PasswordValidator,
    Validation,
)
from src.handlers.http import (
    HttpRequest,
    HttpResponse,
    bad_request,
    forbidden,
    ok,
    server_error,
    unauthorized,
)
from src.validation import first_missing_field, first_non_string_field

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


@dataclass
class SignUpHandler:
    """Handles POST /signup."""

    email_validator: EmailValidator
    add_account: AddAccount
    password_validator: PasswordValidator
    authentication: Authentication
    validation: Validation

    async def handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body
        missing = first_missing_field(body, REQUIRED_FIELDS)
        if missing is not None:
            return bad_request(MissingParamError(missing))

        wrong_type = first_non_string_field(body, REQUIRED_FIELDS)
        if wrong_type is not None:
            return bad_request(InvalidParamError(wrong_type))

        try:
            error = self.validation.validate(body)
            if error is not None:
                return bad_request(error)

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if password != body["passwordConfirmation"]:
                return bad_request(InvalidParamError("passwordConfirmation"))

            if not self.email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            if not self.password_validator.is_valid(password):
                return bad_request(InvalidParamError("password"))

            account = await self.add_account.add(
                AddAccountModel(name=name, email=email, password=password)
            )
            if account is None:
                return forbidden(EmailInUseError())

            result = await self.authentication.auth(
                AuthenticationModel(email=email, password=password)
            )
        except Exception:
            logger.exception("Sign-up failed with an unexpected error")
            return server_error()

        # Only reachable if the account vanished between creation and login
        if result is None:
            return unauthorized()
        return ok(result)
