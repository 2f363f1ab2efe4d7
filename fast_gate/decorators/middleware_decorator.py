import inspect
from typing import Callable, Type, Union

from fast_gate.contracts.middleware import Middleware


def middleware(*middlewares: Union[Type[Middleware], Middleware]):
    """
    Apply one or more middlewares (classes or instances) to a view function.
    The first middleware given is the outermost one.

    Usage:
        @app.route("/posts/<post_id>", methods=["PATCH"])
        @middleware(HandleHttpExceptionsMiddleware, AuthorizeMiddleware("update", "post"))
        async def update_post(post_id, post=None):
            ...
    """
    resolved = []
    for item in middlewares:
        if inspect.isclass(item):
            if not issubclass(item, Middleware):
                raise TypeError(f"{item} must inherit from Middleware")
            item = item()
        elif not isinstance(item, Middleware):
            raise TypeError(f"{item} must be an instance of Middleware")
        resolved.append(item)

    def decorator(func: Callable) -> Callable:
        for instance in reversed(resolved):
            func = instance(func)
        return func

    return decorator
