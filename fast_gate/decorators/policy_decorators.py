import inspect
from typing import Any, Callable, TypeVar, Union

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T", bound=type)


def ability(*names: str) -> Callable[[F], F]:
    """
    Tag a policy method as the answer to the given ability names.

    Usage:
        class PostPolicy(Policy):
            @ability("create-post", "store-post")
            def create(self, user) -> bool: ...
    """
    if not names:
        raise ValueError("ability() requires at least one ability name")

    def decorator(func: F) -> F:
        func.__gate_abilities__ = tuple(getattr(func, "__gate_abilities__", ())) + names  # type: ignore[attr-defined]
        return func

    return decorator


def policy(subject: Union[type, Callable[[], type]]) -> Callable[[T], T]:
    """
    Mark a Policy class as handling `subject` so autodiscovery can register it.

    `subject` is either the class itself or a zero-argument callable returning it,
    for subjects that cannot be imported at definition time:

        @policy(lambda: Post)
        class PostPolicy(Policy): ...
    """
    def decorator(policy_cls: T) -> T:
        policy_cls.__policy_subject__ = subject
        return policy_cls

    return decorator


def resolve_policy_subject(policy_cls: type) -> type:
    """Return the subject class of a `@policy` decorated class, resolving forward references."""
    subject = getattr(policy_cls, "__policy_subject__")
    if not inspect.isclass(subject) and callable(subject):
        subject = subject()
    return subject
