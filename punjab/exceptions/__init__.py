"""Custom exceptions for punjab."""

from .common_exceptions import (
    AppException,
    EnvInvalidException,
)
from .http_exceptions import (
    HttpException,
    UnauthorisedException,
    ForbiddenException,
    ServerErrorException,
)
from .policy_exceptions import (
    PolicyException,
    PolicyNotAuthorizedException,
    PolicyNotFoundException,
    UnknownActionException,
    InvalidPolicyResultException,
    AsyncPolicyException,
)


__all__ = [
    # common
    "AppException",
    "EnvInvalidException",
    # http
    "HttpException",
    "UnauthorisedException",
    "ForbiddenException",
    "ServerErrorException",
    # policy
    "PolicyException",
    "PolicyNotAuthorizedException",
    "PolicyNotFoundException",
    "UnknownActionException",
    "InvalidPolicyResultException",
    "AsyncPolicyException",
]
