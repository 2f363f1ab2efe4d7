"""Contract classes and abstract interfaces.

These are exported so they can be imported directly from :mod:`fast_gate`.
"""

from .middleware import Middleware
from .policy import Policy

__all__ = [
    "Middleware",
    "Policy",
]
