from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

if TYPE_CHECKING:
    from fast_gate.core.gate import Gate
    from fast_gate.core.gate_response import GateResponse


class Authorizable:
    """
    Mixin for principal classes (e.g. User) that adds can(), cannot() and authorize().

    Each call runs the gate check with `self` as the ambient principal:

        if await user.can("update", post):
            ...

    Set `gate` on the class to use a gate other than the package default.
    """

    gate: Optional['Gate'] = None

    def _resolve_gate(self) -> 'Gate':
        if self.gate is not None:
            return self.gate
        from fast_gate.core.gate import gate
        return gate

    async def can(self, abilities: Union[str, Iterable[str]], *args: Any) -> bool:
        """
        Check if this principal can perform all of the given abilities.

        Args:
            abilities: Ability name or list of names
            *args: Subject arguments, e.g. a model instance or a model class
        """
        return await self._resolve_gate().for_principal(self).allows(abilities, args)

    async def can_any(self, abilities: Iterable[str], *args: Any) -> bool:
        return await self._resolve_gate().for_principal(self).any(abilities, args)

    async def cannot(self, abilities: Union[str, Iterable[str]], *args: Any) -> bool:
        return not await self.can(abilities, *args)

    async def authorize(self, ability: str, *args: Any) -> 'GateResponse':
        """
        Authorize this principal to perform an action.

        Raises:
            AuthorizationException: If the ability is denied (403 unless the response sets a status)
        """
        return await self._resolve_gate().for_principal(self).authorize(ability, args)
