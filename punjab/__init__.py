"""
punjab - Policy-based authorization for Python applications

Given a principal, a record and an ability, punjab locates the policy that
governs the record, asks it, and returns or raises the decision:

- Policy contract with deny-by-default abilities and a nested Scope
- check() / ensure() / policy_scope() dispatch, async and sync
- Authorizable mixin for principals (can / cannot / authorize / scope)
- register_policy decorator and policy autodiscovery
- Quart middleware turning denials into 403 responses
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
