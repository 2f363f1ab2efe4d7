from typing import Type, TypeVar

from fast_gate.core.mixins.authorizable import Authorizable

T = TypeVar('T')


def authorizable(principal_cls: Type[T]) -> Type[T]:
    """
    Decorator that adds Authorizable as a parent class to a principal class.

    For proper IDE type checking support use the mixin directly: `class User(Model, Authorizable):`.
    """
    if Authorizable in principal_cls.__mro__:
        return principal_cls

    new_class = type(
        principal_cls.__name__,
        (principal_cls, Authorizable),
        {k: v for k, v in principal_cls.__dict__.items() if k not in ("__dict__", "__weakref__")}
    )

    # Preserve the original module and qualname for proper identification
    new_class.__module__ = principal_cls.__module__
    new_class.__qualname__ = principal_cls.__qualname__

    return new_class
