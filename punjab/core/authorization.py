"""
Policy resolution and dispatch.

The async functions (`check`, `ensure`, `policy_scope`) evaluate both plain and
`async def` abilities and are the default entry points. The `*_sync` variants
serve call sites that cannot await; they refuse coroutine abilities up front
instead of handing back an un-awaited coroutine.

An ability that never completes stalls the awaiting caller. No timeout is applied.
"""

import inspect
import logging
from typing import Any, Optional

from punjab import config
from punjab.contracts.policy import Action, Policy, PolicyScope
from punjab.exceptions.policy_exceptions import (
    AsyncPolicyException,
    InvalidPolicyResultException,
    PolicyNotAuthorizedException,
    PolicyNotFoundException,
    UnknownActionException,
)
from punjab.utils.serialisation import describe_target


def get_policy_class(target: Any) -> type[Policy]:
    """
    Return the policy class associated with a record, model class or scope.

    The association is the `policy` attribute: set on the instance, or on its
    class (e.g. by `@register_policy` or autodiscovery).

    Raises:
        PolicyNotFoundException: If `target` has no policy.
        TypeError: If `policy` is set to something that is not a Policy subclass.
    """
    policy_cls = getattr(target, "policy", None)
    if policy_cls is None:
        raise PolicyNotFoundException(target)
    if not (inspect.isclass(policy_cls) and issubclass(policy_cls, Policy)):
        raise TypeError(
            f"'{describe_target(target)}.policy' must be a Policy subclass, got {policy_cls!r}"
        )
    return policy_cls


def validate_ability(policy_cls: type[Policy], ability: str | Action) -> str:
    """Return the ability name, or raise UnknownActionException if `policy_cls` does not define it."""
    name = ability.value if isinstance(ability, Action) else ability
    if name not in policy_cls.abilities or not callable(getattr(policy_cls, name, None)):
        raise UnknownActionException(name, policy_cls.__name__)
    return name


def resolve_policy(user: Any, record: Any) -> Policy:
    """Build the policy governing `record`, bound to `(user, record)`."""
    return get_policy_class(record)(user, record)


def resolve_scope(user: Any, scope: Any) -> PolicyScope:
    """Build the policy scope for a collection that carries its own `policy`."""
    return get_policy_class(scope).Scope(user, scope)


# --------------- invocation ---------------

def _is_async(method: Any) -> bool:
    # Follows functools.wraps chains; bound methods forward __wrapped__ to their function
    return inspect.iscoroutinefunction(method) or inspect.iscoroutinefunction(inspect.unwrap(method))


def _reject(result: Any, ability: str, policy_name: str) -> InvalidPolicyResultException:
    if inspect.iscoroutine(result):
        result.close()
    return InvalidPolicyResultException(ability, policy_name, result)


async def _invoke(owner: Any, member: str, *args: Any, **kwargs: Any) -> Any:
    method = getattr(owner, member)
    if _is_async(method):
        return await method(*args, **kwargs)
    return method(*args, **kwargs)


def _invoke_sync(owner: Any, member: str, *args: Any, **kwargs: Any) -> Any:
    method = getattr(owner, member)
    if _is_async(method):
        raise AsyncPolicyException(member, type(owner).__qualname__)
    return method(*args, **kwargs)


def _precheck(policy: Policy, ability: str, result: Any) -> Optional[bool]:
    if result is None or isinstance(result, bool):
        return result
    raise _reject(result, f"before({ability})", type(policy).__name__)


def _decide(policy: Policy, ability: str, result: Any) -> bool:
    if not isinstance(result, bool):
        raise _reject(result, ability, type(policy).__name__)

    if config.log_authorization_decisions():
        logging.debug(
            f"[POLICY] {type(policy).__name__}.{ability} {'granted' if result else 'denied'} "
            f"on {describe_target(policy.record)}"
        )
    return result


def _deny(policy: Policy, ability: str) -> None:
    policy_name = type(policy).__name__
    logging.info(f"[POLICY] Denied {policy_name}.{ability} on {describe_target(policy.record)}")
    raise PolicyNotAuthorizedException(ability, policy.record, policy_name)


# --------------- async API ---------------

async def evaluate(policy: Policy, ability: str | Action, *args: Any, **kwargs: Any) -> bool:
    """Run `before` and then the ability on an already resolved policy."""
    name = validate_ability(type(policy), ability)

    decision = _precheck(policy, name, await _invoke(policy, "before", name))
    if decision is None:
        decision = await _invoke(policy, name, *args, **kwargs)
    return _decide(policy, name, decision)


async def check(user: Any, record: Any, ability: str | Action, /, *args: Any, **kwargs: Any) -> bool:
    """
    Ask the record's policy whether `user` may perform `ability`.

    Extra positional and keyword arguments are passed to the ability method.

    Returns:
        bool: The decision. Denial is a normal return value, not an exception.

    Raises:
        PolicyNotFoundException: If the record has no policy.
        UnknownActionException: If the policy does not define `ability`.
        InvalidPolicyResultException: If the ability returns anything but a bool.
    """
    return await evaluate(resolve_policy(user, record), ability, *args, **kwargs)


async def ensure(user: Any, record: Any, ability: str | Action, /, *args: Any, **kwargs: Any) -> None:
    """
    Like `check`, but raises PolicyNotAuthorizedException on denial.

    Resolution and lookup errors propagate unchanged.
    """
    policy = resolve_policy(user, record)
    if not await evaluate(policy, ability, *args, **kwargs):
        _deny(policy, validate_ability(type(policy), ability))


async def policy_scope(user: Any, scope: Any) -> Any:
    """Return whatever the scope's `resolve()` returns for `user`."""
    resolver = resolve_scope(user, scope)
    resolved = await _invoke(resolver, "resolve")
    if config.log_authorization_decisions():
        logging.debug(f"[SCOPE] Resolved {type(resolver).__qualname__} for {describe_target(scope)}")
    return resolved


# --------------- sync API ---------------

def evaluate_sync(policy: Policy, ability: str | Action, *args: Any, **kwargs: Any) -> bool:
    name = validate_ability(type(policy), ability)

    decision = _precheck(policy, name, _invoke_sync(policy, "before", name))
    if decision is None:
        decision = _invoke_sync(policy, name, *args, **kwargs)
    return _decide(policy, name, decision)


def check_sync(user: Any, record: Any, ability: str | Action, /, *args: Any, **kwargs: Any) -> bool:
    """Synchronous `check`. Raises AsyncPolicyException for `async def` abilities."""
    return evaluate_sync(resolve_policy(user, record), ability, *args, **kwargs)


def ensure_sync(user: Any, record: Any, ability: str | Action, /, *args: Any, **kwargs: Any) -> None:
    policy = resolve_policy(user, record)
    if not evaluate_sync(policy, ability, *args, **kwargs):
        _deny(policy, validate_ability(type(policy), ability))


def policy_scope_sync(user: Any, scope: Any) -> Any:
    resolver = resolve_scope(user, scope)
    resolved = _invoke_sync(resolver, "resolve")
    if config.log_authorization_decisions():
        logging.debug(f"[SCOPE] Resolved {type(resolver).__qualname__} for {describe_target(scope)}")
    return resolved


__all__ = [
    "check",
    "check_sync",
    "ensure",
    "ensure_sync",
    "evaluate",
    "evaluate_sync",
    "get_policy_class",
    "policy_scope",
    "policy_scope_sync",
    "resolve_policy",
    "resolve_scope",
    "validate_ability",
]
