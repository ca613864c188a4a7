from enum import Enum
from typing import Any, Callable, ClassVar, FrozenSet, Optional, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class Action(str, Enum):
    """Standard abilities every policy answers."""

    INDEX = "index"
    SHOW = "show"
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


def ability(func: F) -> F:
    """
    Mark a policy method as an application-specific ability.

    Usage:
        class PostPolicy(Policy):
            @ability
            def publish(self) -> bool:
                return self.user.is_editor
    """
    func.__policy_ability__ = True
    return func


class PolicyScope:
    """
    Filters a collection down to what `user` may see.

    `scope` is whatever the collection layer hands in (a model class, a query,
    a list). Default behaviour returns it unchanged.
    """

    def __init__(self, user: Any, scope: Any) -> None:
        self.user = user
        self.scope = scope

    def resolve(self) -> Any:
        return self.scope


# Instance state and dispatch machinery, never callable as abilities
RESERVED_NAMES = frozenset({"user", "record", "before", "Scope", "abilities"})


class Policy:
    """
    Base policy. One instance is built per check, bound to `(user, record)`.

    Every standard ability denies until a subclass overrides it. Abilities may
    be plain methods or coroutines, and may take extra per-call arguments.
    """

    Scope: ClassVar[type[PolicyScope]] = PolicyScope
    abilities: ClassVar[FrozenSet[str]] = frozenset(action.value for action in Action)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        declared = {
            name for name, member in vars(cls).items()
            if getattr(member, "__policy_ability__", False)
        }
        if reserved := sorted(declared & RESERVED_NAMES):
            raise TypeError(f"{cls.__name__} cannot declare reserved names as abilities: {', '.join(reserved)}")
        cls.abilities = frozenset(cls.abilities | declared)

        if not (isinstance(cls.Scope, type) and issubclass(cls.Scope, PolicyScope)):
            raise TypeError(f"{cls.__name__}.Scope must subclass PolicyScope")

    def __init__(self, user: Any, record: Any) -> None:
        self.user = user
        self.record = record

    def before(self, ability: str) -> Optional[bool]:
        """
        Called before any ability. If returns True, grants access.
        If returns False, denies access. If returns None, continues to the ability method.

        Args:
            ability: The name of the ability being checked

        Returns:
            Optional[bool]: True to grant, False to deny, None to continue
        """
        return None

    def index(self) -> bool:
        return False

    def show(self) -> bool:
        return False

    def create(self) -> bool:
        return False

    def update(self) -> bool:
        return False

    def destroy(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(user={self.user!r}, record={self.record!r})"
