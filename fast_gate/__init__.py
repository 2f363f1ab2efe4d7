"""
FastGate - ability and policy based authorization for async Python applications

This package provides:
- A Gate resolving named abilities through global callbacks or per-class policies
- Before/after hooks around every check
- An ambient, task-isolated "current principal"
- GateResponse results with messages, codes and HTTP statuses
- Quart middlewares and an Authorizable mixin for principal models

Think of it as Laravel's Gate for Python applications.
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
