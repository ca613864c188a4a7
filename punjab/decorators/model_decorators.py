import inspect
from typing import Type, TypeVar

from punjab.contracts.policy import Policy
from punjab.core.mixins.authorizable import Authorizable

T = TypeVar('T')


def register_policy(policy_cls: type[Policy]):
    """Associate `policy_cls` with the decorated model class."""
    if not (inspect.isclass(policy_cls) and issubclass(policy_cls, Policy)):
        raise TypeError(f"{policy_cls!r} must inherit from Policy")

    def decorator(model_cls):
        model_cls.policy = policy_cls
        return model_cls
    return decorator


def authorizable(model_cls: Type[T]) -> Type[T]:
    """
    Decorator that adds Authorizable as a parent class to the model.

    For proper IDE type checking support use Authorizable mixin `class User(Base, Authorizable):`.
    """
    if Authorizable in model_cls.__mro__:
        return model_cls

    namespace = {
        key: value for key, value in model_cls.__dict__.items()
        if key not in ("__dict__", "__weakref__")
    }
    new_class = type(model_cls.__name__, (model_cls, Authorizable), namespace)

    # Preserve the original module and qualname for proper identification
    new_class.__module__ = model_cls.__module__
    new_class.__qualname__ = model_cls.__qualname__

    return new_class
