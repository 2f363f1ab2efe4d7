from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, Awaitable, Callable

Handler = Callable[..., Awaitable[Any]]


class Middleware(ABC):
    """Wraps a Quart view function; subclasses decide whether and how `next_handler` runs."""

    @abstractmethod
    async def handle(self, next_handler: Handler, *args, **kwargs) -> Any:
        """Run the middleware around `next_handler`, forwarding the view's arguments."""

    def __call__(self, func: Handler) -> Handler:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            return await self.handle(func, *args, **kwargs)
        return wrapper
