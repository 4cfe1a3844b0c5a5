"""
Request handlers - Framework-independent endpoint orchestration.

Each handler turns an untyped HttpRequest into an HttpResponse by
validating the payload, delegating to use-cases, and mapping every
outcome through the helpers in src.handlers.http.
"""

from .http import HttpRequest, HttpResponse
from .login import LoginHandler
from .signup import SignUpHandler

__all__ = ["HttpRequest", "HttpResponse", "LoginHandler", "SignUpHandler"]
