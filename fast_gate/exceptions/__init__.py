"""Custom exceptions for FastGate applications."""

from .common_exceptions import (
    InvalidAbilityException,
    InvalidPolicyException,
    EnvInvalidException,
)
from .gate_exceptions import AuthorizationException
from .http_exceptions import (
    HttpException,
    UnauthorisedException,
    ServerErrorException,
    ForbiddenException,
    NotFoundException,
)


__all__ = [
    # common
    "InvalidAbilityException",
    "InvalidPolicyException",
    "EnvInvalidException",
    # gate
    "AuthorizationException",
    # http
    "HttpException",
    "UnauthorisedException",
    "ServerErrorException",
    "ForbiddenException",
    "NotFoundException",
]
