from typing import Any

from punjab.contracts.policy import Action
from punjab.core.authorization import check, ensure, policy_scope


class Authorizable:
    """
    Mixin class that adds authorization capabilities to principals (e.g. User).
    Provides can(), cannot(), authorize() and scope() methods.
    """

    async def can(self, ability: str | Action, target: Any, *args: Any, **kwargs: Any) -> bool:
        """
        Check if the user can perform an action.

        Args:
            ability: Ability name defined on the target's policy
            target: Model instance or model class carrying a policy
            *args, **kwargs: Extra arguments for the ability method

        Returns:
            bool: True if user can perform the action
        """
        return await check(self, target, ability, *args, **kwargs)

    async def cannot(self, ability: str | Action, target: Any, *args: Any, **kwargs: Any) -> bool:
        return not await self.can(ability, target, *args, **kwargs)

    async def authorize(self, ability: str | Action, target: Any, *args: Any, **kwargs: Any) -> None:
        """
        Authorize user to perform an action.

        Raises:
            PolicyNotAuthorizedException: If user is not authorized
        """
        await ensure(self, target, ability, *args, **kwargs)

    async def scope(self, target: Any) -> Any:
        """Resolve the target's policy scope for this user."""
        return await policy_scope(self, target)
