"""Quart middlewares shipped with the package."""

from .authorize_middleware import AuthorizeMiddleware
from .handle_http_exceptions_middleware import HandleHttpExceptionsMiddleware
from .principal_middleware import PrincipalMiddleware

__all__ = [
    "AuthorizeMiddleware",
    "HandleHttpExceptionsMiddleware",
    "PrincipalMiddleware",
]
