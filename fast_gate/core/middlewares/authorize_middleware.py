from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional

from quart import g

from fast_gate import config
from fast_gate.contracts.middleware import Middleware
from fast_gate.core.context import acting_as

if TYPE_CHECKING:
    from fast_gate.core.gate import Gate


class AuthorizeMiddleware(Middleware):
    """Authorize the request's principal for an ability before executing the handler.

    Usage examples:
        - Instance ability (`post` is a handler kwarg bound earlier in the chain):
            @middleware(AuthorizeMiddleware("update", "post"))
            async def update_post(post: Post):
                ...

        - Class ability:
            @middleware(AuthorizeMiddleware("create", Post))
            async def create_post():
                ...

        - Global ability without subject:
            @middleware(AuthorizeMiddleware("view-dashboard"))
            async def dashboard():
                ...
    """

    def __init__(
        self,
        ability: str,
        *targets: Any,
        key: Optional[str] = None,
        gate: Optional['Gate'] = None,
    ) -> None:
        self.ability = ability
        self.targets = targets
        self.key = key or config.GATE_PRINCIPAL_KEY
        self._gate = gate

    @property
    def gate(self) -> 'Gate':
        if self._gate is not None:
            return self._gate
        from fast_gate.core.gate import gate
        return gate

    async def handle(
        self,
        next_handler: Callable[..., Awaitable[Any]],
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        resolved_targets = []
        for target in self.targets:
            # Strings reference handler kwargs
            if isinstance(target, str):
                if target not in kwargs:
                    raise ValueError(
                        f"AuthorizeMiddleware: target kwarg '{target}' not found in handler arguments"
                    )
                resolved_targets.append(kwargs[target])
            else:
                resolved_targets.append(target)

        with acting_as(g.get(self.key)):
            await self.gate.authorize(self.ability, resolved_targets)

        return await next_handler(*args, **kwargs)
