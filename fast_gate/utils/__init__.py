from .ability_utils import format_ability_to_method
from .async_utils import call_maybe_async

__all__ = [
    "format_ability_to_method",
    "call_maybe_async",
]
