from abc import ABC
from typing import Any, Callable, ClassVar, Dict, Optional

from fast_gate.utils.ability_utils import format_ability_to_method, is_ability_method_name


class Policy(ABC):
    """
    Bundles the ability checks for one subject type.

    Ability methods receive the principal first, then the subject arguments:

        class PostPolicy(Policy):
            def update(self, user, post) -> bool:
                return user is not None and post.author_id == user.id

            @ability("create-post")
            async def create(self, user) -> bool:
                return user is not None

    An ability resolves to the method tagged with `@ability(name)` if there is one,
    otherwise to the method named after the ability (`create-post` -> `createPost`).
    """

    _ability_methods: ClassVar[Dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        table: Dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, attr in vars(klass).items():
                for ability_name in getattr(attr, "__gate_abilities__", ()):
                    table[ability_name] = attr_name
        cls._ability_methods = table

    def before(self, principal: Any, ability: str, *args: Any) -> Optional[Any]:
        """
        Called before the ability method of this policy.

        Return True/False (or a GateResponse) to decide the check right here,
        or None to continue to the ability method.
        """
        return None

    def method_for(self, ability: str) -> Optional[Callable[..., Any]]:
        """Return the bound method answering `ability`, or None if this policy has none."""
        name = self._ability_methods.get(ability) or format_ability_to_method(ability)
        if not is_ability_method_name(name):
            return None

        method = getattr(self, name, None)
        return method if callable(method) else None
