from typing import Any, Awaitable, Callable, Optional

from quart import g

from fast_gate import config
from fast_gate.contracts.middleware import Middleware
from fast_gate.core.context import acting_as


class PrincipalMiddleware(Middleware):
    """Run the handler with the request's principal (``g.user`` by default) as the ambient principal.

    Place it after whatever middleware authenticates the request and sets ``g.user``.
    """

    def __init__(self, key: Optional[str] = None) -> None:
        self.key = key or config.GATE_PRINCIPAL_KEY

    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        with acting_as(g.get(self.key)):
            return await next_handler(*args, **kwargs)
