"""Policy resolution and authorization exceptions."""

from typing import Any, Optional

from punjab.exceptions.common_exceptions import AppException
from punjab.utils.serialisation import describe_target


class PolicyException(AppException):
    """Base for every error raised by the authorization core."""

    def __init__(self, message: str, *, http_status_code: int = 500, **kwargs) -> None:
        super().__init__(message, http_status_code=http_status_code, **kwargs)


class PolicyNotAuthorizedException(PolicyException):
    """The policy answered the question and the answer is no. Only `ensure` raises this."""

    def __init__(self, ability: str, record: Any, policy_name: Optional[str] = None) -> None:
        self.ability = ability
        self.record = record
        self.policy_name = policy_name
        super().__init__(
            f"Insufficient privileges to {ability} {describe_target(record)}",
            http_status_code=403,
            error_type="insufficient_privileges",
            data={"ability": ability, "policy": policy_name},
        )


class PolicyNotFoundException(PolicyException):
    """No policy is associated with the record or scope."""

    def __init__(self, target: Any) -> None:
        self.target = target
        super().__init__(f"No policy registered for '{describe_target(target)}'")


class UnknownActionException(PolicyException):
    def __init__(self, ability: str, policy_name: str) -> None:
        self.ability = ability
        self.policy_name = policy_name
        super().__init__(f"Policy '{policy_name}' does not define ability '{ability}'")


class InvalidPolicyResultException(PolicyException):
    def __init__(self, ability: str, policy_name: str, result: Any) -> None:
        self.ability = ability
        self.policy_name = policy_name
        self.result = result
        super().__init__(
            f"Policy '{policy_name}' returned {type(result).__name__} from '{ability}', expected bool"
        )


class AsyncPolicyException(PolicyException):
    """An `async def` ability or hook was reached through the synchronous API."""

    def __init__(self, member: str, policy_name: str) -> None:
        self.member = member
        self.policy_name = policy_name
        super().__init__(
            f"'{policy_name}.{member}' is a coroutine function; use the async API to evaluate it"
        )
