"""Core utilities re-exported for convenient access."""

from .authorization import *  # noqa: F401,F403
from .middlewares import *  # noqa: F401,F403
from .mixins import *  # noqa: F401,F403
