"""Contract classes and abstract interfaces.

These are the building blocks implemented by applications and are exported so
they can be imported directly from :mod:`punjab`.
"""

from .middleware import Middleware
from .policied import Policied
from .policy import Action, Policy, PolicyScope, ability

__all__ = [
    "Action",
    "Middleware",
    "Policied",
    "Policy",
    "PolicyScope",
    "ability",
]
