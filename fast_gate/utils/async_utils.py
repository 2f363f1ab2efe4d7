import inspect
from typing import Any, Callable


async def call_maybe_async(func: Callable[..., Any], *args, **kwargs) -> Any:
    """Call a sync or async callable and return its (awaited) result."""
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result
