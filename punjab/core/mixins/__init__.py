from .authorizable import Authorizable

__all__ = [
    "Authorizable",
]
