from __future__ import annotations

from typing import Any, Awaitable, Callable

from quart import g

from punjab.contracts.middleware import Middleware
from punjab.contracts.policy import Action
from punjab.core.authorization import ensure, get_policy_class, validate_ability
from punjab.exceptions.http_exceptions import ForbiddenException, UnauthorisedException
from punjab.exceptions.policy_exceptions import PolicyNotAuthorizedException


class AuthorizeMiddleware(Middleware):
    """Authorize the current principal (default: `g.user`) against a policy before executing the handler.

    Usage examples:
        - Instance ability (the handler receives the bound record as `post`):
            @middleware(AuthorizeMiddleware("update", "post"))
            async def update_post(post: Post):
                ...

        - Class ability:
            @middleware(AuthorizeMiddleware(Action.CREATE, Post))
            async def create_post():
                ...

    A fixed target carrying a policy has its ability validated here, so a typo
    fails when routes are defined rather than on the first request.
    """

    def __init__(
        self,
        ability: str | Action,
        target: str | Any,
        principal_key: str = "user",
        allow_anonymous: bool = False,
    ) -> None:
        self.ability = ability
        self.target = target
        self.principal_key = principal_key
        self.allow_anonymous = allow_anonymous

        if not isinstance(target, str) and getattr(target, "policy", None) is not None:
            self.ability = validate_ability(get_policy_class(target), ability)

    async def handle(
        self,
        next_handler: Callable[..., Awaitable[Any]],
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        principal = g.get(self.principal_key)
        if principal is None and not self.allow_anonymous:
            raise UnauthorisedException()

        # Resolve target if it is a kwarg reference
        if isinstance(self.target, str):
            if self.target not in kwargs:
                raise ValueError(
                    f"AuthorizeMiddleware: target kwarg '{self.target}' not found in handler arguments"
                )
            record = kwargs[self.target]
        else:
            record = self.target

        try:
            await ensure(principal, record, self.ability)
        except PolicyNotAuthorizedException as e:
            raise ForbiddenException(error_type=e.error_type, message=e.message, data=e.data) from e

        return await next_handler(*args, **kwargs)
