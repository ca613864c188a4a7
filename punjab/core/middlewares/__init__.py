"""Quart middlewares shipped with the package."""

from .authorize_middleware import AuthorizeMiddleware
from .handle_http_exceptions_middleware import HandleHttpExceptionsMiddleware

__all__ = [
    "AuthorizeMiddleware",
    "HandleHttpExceptionsMiddleware",
]
