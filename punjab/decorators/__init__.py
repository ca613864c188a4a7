from .middleware_decorator import middleware
from .model_decorators import (
    register_policy,
    authorizable,
)

__all__ = [
    "middleware",
    "register_policy",
    "authorizable",
]
