import logging
import os
from typing import Any, Callable, Awaitable

from fast_gate.contracts.middleware import Middleware
from fast_gate.exceptions import AuthorizationException, HttpException, ServerErrorException


class HandleHttpExceptionsMiddleware(Middleware):
    """Turn raised HttpExceptions (including authorization denials) into JSON responses."""

    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        try:
            return await next_handler(*args, **kwargs)
        except AuthorizationException as e:
            logging.info(f"[GATE] Request denied with status {e.status_code}: {e.message}")
            return e.to_response()
        except HttpException as e:
            return e.to_response()
        except Exception as e:
            logging.exception("Unhandled exception while handling request", exc_info=e)
            if os.getenv("ENV") == "debug":
                raise e

            return ServerErrorException().to_response()
