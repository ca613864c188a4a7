from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from punjab.contracts.policy import Policy


@runtime_checkable
class Policied(Protocol):
    """Anything that names the policy governing it through a `policy` attribute.

    Models get one via `@register_policy(...)` or autodiscovery. Collections
    passed to `policy_scope` must carry it directly.
    """

    policy: type["Policy"]
