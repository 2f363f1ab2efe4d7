from .authorizable_decorator import authorizable
from .middleware_decorator import middleware
from .policy_decorators import ability, policy

__all__ = [
    "ability",
    "authorizable",
    "middleware",
    "policy",
]
