import inspect
import logging
from contextlib import AbstractContextManager
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from fast_gate.contracts.policy import Policy
from fast_gate.core.context import acting_as, current_principal, run_as
from fast_gate.core.gate_response import GateResponse
from fast_gate.core.policy_registry import PolicyRegistry
from fast_gate.exceptions.common_exceptions import InvalidAbilityException
from fast_gate.utils.ability_utils import format_ability_to_method, is_ability_method_name, normalise_abilities
from fast_gate.utils.async_utils import call_maybe_async

Result = Union[bool, None, GateResponse]
MaybeAwaitable = Union[Result, Awaitable[Result]]

AbilityCallback = Callable[..., MaybeAwaitable]
BeforeCallback = Callable[[Any, str, List[Any]], MaybeAwaitable]
AfterCallback = Callable[[Any, str, Result, List[Any]], MaybeAwaitable]

Abilities = Union[str, Iterable[str]]


class Gate:
    """
    Resolves abilities for the ambient principal.

    An ability is answered by the policy registered for the first argument's class
    (when that policy has a matching method) or else by the callback given to
    `define()`. Before-hooks can decide a check up front; after-hooks can fill in
    a result when nothing else did. Unresolved abilities are denied.

    Usage:
        gate.define("view-dashboard", lambda user: user is not None and user.is_admin)

        with acting_as(user):
            if await gate.allows("update", [post]):
                ...
            await gate.authorize("delete", [post])  # raises AuthorizationException
    """

    def __init__(self, policies: Optional[PolicyRegistry] = None) -> None:
        self._abilities: Dict[str, AbilityCallback] = {}
        self._before_callbacks: List[BeforeCallback] = []
        self._after_callbacks: List[AfterCallback] = []
        self.policies = policies if policies is not None else PolicyRegistry()

    # --------------- registration ---------------
    def has(self, abilities: Abilities) -> bool:
        """
        Determine if the given abilities have been defined.

        Only callbacks registered through `define()` count; policies are not consulted.
        """
        return all(ability in self._abilities for ability in normalise_abilities(abilities))

    def define(self, ability: str, callback: Optional[AbilityCallback] = None):
        """
        Define a new ability. The last definition for a name wins.

        Without a callback this returns a decorator:

            @gate.define("publish-post")
            async def publish_post(user, post) -> bool: ...
        """
        if not isinstance(ability, str) or not ability:
            raise InvalidAbilityException(ability)

        if callback is None:
            def decorator(func: AbilityCallback) -> AbilityCallback:
                self._set_ability(ability, func)
                return func
            return decorator

        self._set_ability(ability, callback)
        return self

    def _set_ability(self, ability: str, callback: AbilityCallback) -> None:
        if not callable(callback):
            raise TypeError(f"Callback for ability {ability!r} must be callable, got {callback!r}")
        self._abilities[ability] = callback

    def before(self, callback: BeforeCallback) -> BeforeCallback:
        """Register a callback to run before all Gate checks."""
        self._before_callbacks.append(callback)
        return callback

    def after(self, callback: AfterCallback) -> AfterCallback:
        """Register a callback to run after all Gate checks."""
        self._after_callbacks.append(callback)
        return callback

    def register_policy(self, subject_type: type, policy: Any) -> 'Gate':
        self.policies.register(subject_type, policy)
        return self

    def register_policies(self, pairs: Iterable[Tuple[type, Any]]) -> 'Gate':
        self.policies.register_many(pairs)
        return self

    def policy_for(self, subject: Any) -> Optional[Any]:
        return self.policies.policy_for(subject)

    def reset(self) -> None:
        """Forget every ability, hook and policy (useful for testing)."""
        self._abilities.clear()
        self._before_callbacks.clear()
        self._after_callbacks.clear()
        self.policies.reset()

    # --------------- principal scope ---------------
    def acting_as(self, principal: Any) -> AbstractContextManager:
        return acting_as(principal)

    def run_as(self, principal: Any, callback: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return run_as(principal, callback, *args, **kwargs)

    def for_principal(self, principal: Any) -> 'PrincipalGate':
        """Get a view of this gate that runs every check as `principal`."""
        return PrincipalGate(self, principal)

    # --------------- queries ---------------
    async def allows(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        """Determine if all of the given abilities should be granted for the current principal."""
        return await self.check(abilities, args)

    async def denies(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        """Determine if any of the given abilities should be denied for the current principal."""
        return not await self.allows(abilities, args)

    async def check(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        for ability in normalise_abilities(abilities):
            if not (await self.inspect(ability, args)).allowed:
                return False
        return True

    async def any(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        """Determine if any one of the given abilities should be granted for the current principal."""
        for ability in normalise_abilities(abilities):
            if (await self.inspect(ability, args)).allowed:
                return True
        return False

    async def none(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        """Determine if all of the given abilities should be denied for the current principal."""
        return not await self.any(abilities, args)

    async def authorize(self, ability: str, args: Optional[Sequence[Any]] = None) -> GateResponse:
        """
        Authorize the current principal for the given ability.

        Raises:
            AuthorizationException: If the ability is denied.
        """
        return (await self.inspect(ability, args)).authorize()

    async def inspect(self, ability: str, args: Optional[Sequence[Any]] = None) -> GateResponse:
        """Get the `GateResponse` for the given ability, coercing raw booleans and None."""
        result = await self.raw(ability, args)

        if isinstance(result, GateResponse):
            return result

        return GateResponse.allow() if result else GateResponse.deny()

    async def raw(self, ability: str, args: Optional[Sequence[Any]] = None) -> Result:
        """Get the raw result from the authorization callback."""
        args = list(args) if args is not None else []
        principal = current_principal()

        # A non-null answer from a before-hook overrides every other check
        result = await self._call_before_callbacks(principal, ability, args)
        if result is None:
            result = await self._call_auth_callback(principal, ability, args)

        return await self._call_after_callbacks(principal, ability, args, result)

    # --------------- resolution ---------------
    async def _call_before_callbacks(self, principal: Any, ability: str, args: List[Any]) -> Result:
        for before in self._before_callbacks:
            result = await call_maybe_async(before, principal, ability, args)
            if result is not None:
                logging.debug(f"[GATE] '{ability}' decided by before callback {_name(before)}")
                return result
        return None

    async def _call_after_callbacks(self, principal: Any, ability: str, args: List[Any], result: Result) -> Result:
        # Coalescing pass: hooks only run while nothing has produced a result yet
        for after in self._after_callbacks:
            if result is not None:
                break
            result = await call_maybe_async(after, principal, ability, result, args)
        return result

    async def _call_auth_callback(self, principal: Any, ability: str, args: List[Any]) -> Result:
        if args and args[0]:
            policy = self.policies.policy_for(args[0])
            if policy is not None:
                method = self._resolve_policy_method(policy, ability)
                if method is not None:
                    logging.debug(f"[GATE] '{ability}' resolved by {type(policy).__name__}")
                    return await self._call_policy(policy, method, principal, ability, args)

        if ability in self._abilities:
            logging.debug(f"[GATE] '{ability}' resolved by ability callback")
            return await call_maybe_async(self._abilities[ability], principal, *args)

        logging.debug(f"[GATE] '{ability}' has no callback, denying")
        return None

    def _resolve_policy_method(self, policy: Any, ability: str) -> Optional[Callable[..., Any]]:
        if isinstance(policy, Policy):
            return policy.method_for(ability)

        name = format_ability_to_method(ability)
        if not is_ability_method_name(name):
            return None

        method = getattr(policy, name, None)
        return method if callable(method) else None

    async def _call_policy(self, policy: Any, method: Callable[..., Any], principal: Any, ability: str, args: List[Any]) -> Result:
        before = getattr(policy, "before", None)
        if callable(before):
            result = await call_maybe_async(before, principal, ability, *args)
            if result is not None:
                return result

        # A class reference as first argument only selected the policy; the method doesn't take it
        if inspect.isclass(args[0]):
            args = args[1:]

        return await call_maybe_async(method, principal, *args)


class PrincipalGate:
    """Gate view that runs each query with a fixed principal in scope."""

    def __init__(self, gate: Gate, principal: Any) -> None:
        self._gate = gate
        self._principal = principal

    @property
    def principal(self) -> Any:
        return self._principal

    async def allows(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        with acting_as(self._principal):
            return await self._gate.allows(abilities, args)

    async def denies(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        with acting_as(self._principal):
            return await self._gate.denies(abilities, args)

    async def check(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        with acting_as(self._principal):
            return await self._gate.check(abilities, args)

    async def any(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        with acting_as(self._principal):
            return await self._gate.any(abilities, args)

    async def none(self, abilities: Abilities, args: Optional[Sequence[Any]] = None) -> bool:
        with acting_as(self._principal):
            return await self._gate.none(abilities, args)

    async def authorize(self, ability: str, args: Optional[Sequence[Any]] = None) -> GateResponse:
        with acting_as(self._principal):
            return await self._gate.authorize(ability, args)

    async def inspect(self, ability: str, args: Optional[Sequence[Any]] = None) -> GateResponse:
        with acting_as(self._principal):
            return await self._gate.inspect(ability, args)

    async def raw(self, ability: str, args: Optional[Sequence[Any]] = None) -> Result:
        with acting_as(self._principal):
            return await self._gate.raw(ability, args)


def _name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", repr(callback))


# Public default gate
gate = Gate()


__all__ = [
    "Gate",
    "PrincipalGate",
    "gate",
]
