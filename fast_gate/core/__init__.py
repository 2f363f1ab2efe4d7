"""Core components re-exported for convenient access."""

from .context import *  # noqa: F401,F403
from .gate import *  # noqa: F401,F403
from .gate_response import GateResponse  # noqa: F401
from .middlewares import *  # noqa: F401,F403
from .mixins import *  # noqa: F401,F403
from .policy_registry import PolicyRegistry  # noqa: F401
