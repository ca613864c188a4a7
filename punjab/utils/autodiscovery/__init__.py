from .policy_autodiscovery import autodiscover_policies

__all__ = [
    "autodiscover_policies",
]
