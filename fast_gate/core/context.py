from __future__ import annotations

import inspect
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, Optional, Tuple, Type, TypeVar, overload, cast


T = TypeVar("T")


class ContextKey(Generic[T]):
    """Typed key handle for values stored in the ambient context.

    Using a typed key provides better type inference for `get`/`set` calls.
    """

    __slots__ = ("name", "default")

    def __init__(self, name: str, default: Optional[T] = None) -> None:
        self.name = name
        self.default = default

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ContextKey(name={self.name!r}, default={self.default!r})"


class _ContextStore:
    """Ambient, typed runtime context based on Python ContextVars.

    - Values live in one `ContextVar` per key, so every asyncio task (which runs in a
      copy of its parent's context) and every thread sees its own values.
    - `scope()` sets a value for the extent of a block and restores the previous one.
    """

    def __init__(self) -> None:
        self._vars: Dict[str, ContextVar[Any]] = {}
        self._defaults: Dict[str, Any] = {}

    def define(self, key: ContextKey[T]) -> ContextKey[T]:
        """Define/register a key. If already present, returns the same key."""
        self._get_var(key.name, default=key.default)
        return key

    def _get_var(self, name: str, default: Any = None) -> ContextVar[Any]:
        if name not in self._vars:
            self._vars[name] = ContextVar(name, default=default)
            if default is not None:
                self._defaults[name] = default
        return self._vars[name]

    def _resolve(self, key: ContextKey[Any] | str) -> Tuple[str, Any]:
        if isinstance(key, ContextKey):
            return key.name, key.default
        return key, self._defaults.get(key, None)

    @overload
    def get(self, key: ContextKey[T]) -> Optional[T]:
        ...

    @overload
    def get(self, key: str, default: Any = None) -> Any:
        ...

    def get(self, key: ContextKey[Any] | str, default: Any = None) -> Any:
        name, var_default = self._resolve(key)
        val = self._get_var(name, default=var_default).get()
        return default if val is None and default is not None else val

    def set(self, key: ContextKey[Any] | str, value: Any) -> None:
        name, var_default = self._resolve(key)
        self._get_var(name, default=var_default).set(value)

    @contextmanager
    def scope(self, key: ContextKey[T] | str, value: Any) -> Iterator[Any]:
        """Set `key` to `value` for the duration of the block.

        The previous value is restored on exit, including when the block raises.
        """
        name, var_default = self._resolve(key)
        var = self._get_var(name, default=var_default)
        token = var.set(value)
        try:
            yield value
        finally:
            var.reset(token)

    def clear(self, *names: str) -> None:
        """Clear selected keys (or all if none provided) back to defaults for this context."""
        to_clear: Iterable[str] = names or tuple(self._vars.keys())
        for name in to_clear:
            default = self._defaults.get(name, None)
            self._get_var(name, default=default).set(default)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._vars.keys())


# Public singleton store
context = _ContextStore()


U = TypeVar("U")


class _DefineKey:
    """Callable + subscribable factory for `ContextKey`.

    Supports both:
    - define_key("name", default=None)
    - define_key[T]("name", default=None)
    """

    def __call__(self, name: str, default: Optional[U] = None) -> ContextKey[U]:
        key: ContextKey[Any] = ContextKey(name, default)
        return cast(ContextKey[U], context.define(key))

    def __getitem__(self, _typ: Type[U]) -> Callable[..., ContextKey[U]]:
        return self.__call__


define_key = _DefineKey()


PrincipalKey: ContextKey[Any] = define_key("gate_principal")


def current_principal() -> Any:
    """Return the principal of the enclosing scope, or None outside any scope."""
    return context.get(PrincipalKey)


@contextmanager
def acting_as(principal: Any) -> Iterator[Any]:
    """Make `principal` the ambient principal for the enclosed block.

    Usage:
        with acting_as(user):
            await gate.allows("update-post", [post])
    """
    with context.scope(PrincipalKey, principal):
        yield principal


def run_as(principal: Any, callback: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run `callback` with `principal` as the ambient principal.

    Coroutine functions get a coroutine back that enters the scope when awaited,
    so the principal stays visible across every suspension point of the body.
    Plain callables run synchronously inside the scope.
    """
    if inspect.iscoroutinefunction(callback):
        async def scoped():
            with acting_as(principal):
                return await callback(*args, **kwargs)

        return scoped()

    with acting_as(principal):
        result = callback(*args, **kwargs)

    if inspect.isawaitable(result):
        # A plain callable handed back an awaitable; finish it inside the scope too
        async def finish():
            with acting_as(principal):
                return await result

        return finish()

    return result


__all__ = [
    "ContextKey",
    "context",
    "define_key",
    "PrincipalKey",
    "current_principal",
    "acting_as",
    "run_as",
]
