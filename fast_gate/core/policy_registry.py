import inspect
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from fast_gate.exceptions.common_exceptions import InvalidPolicyException


class PolicyRegistry:
    """
    Maps subject classes to policy instances.

    Lookup first tries the subject's exact class, then scans registrations in
    insertion order for one the subject derives from. When several registered
    classes are ancestors of the subject, which one wins depends on that order only;
    no "most derived" ranking is applied.
    """

    def __init__(self) -> None:
        self._policies: Dict[type, Any] = {}

    def register(self, subject_type: type, policy: Any) -> None:
        if not inspect.isclass(subject_type):
            raise InvalidPolicyException(subject_type)

        # Ancestor lookups run isinstance/issubclass against every registration;
        # types that refuse them (e.g. non runtime-checkable Protocols) would break lookup
        try:
            isinstance(object(), subject_type)
            issubclass(object, subject_type)
        except TypeError as e:
            raise InvalidPolicyException(subject_type) from e

        if subject_type in self._policies:
            logging.warning(
                f"[GATE] Overwriting policy for {subject_type.__name__}: "
                f"{type(self._policies[subject_type]).__name__} -> {type(policy).__name__}"
            )

        self._policies[subject_type] = policy
        logging.debug(f"[GATE] Registered {type(policy).__name__} for {subject_type.__name__}")

    def register_many(self, pairs: Iterable[Tuple[type, Any]]) -> None:
        for subject_type, policy in pairs:
            self.register(subject_type, policy)

    def policy_for(self, subject: Any) -> Optional[Any]:
        """
        Get the policy for a subject instance or subject class.

        Returns:
            The policy, or None when no registration matches.
        """
        is_class = inspect.isclass(subject)
        target = subject if is_class else type(subject)

        if target in self._policies:
            return self._policies[target]

        for subject_type, policy in self._policies.items():
            if is_class:
                if issubclass(subject, subject_type):
                    return policy
            elif isinstance(subject, subject_type):
                return policy

        return None

    def has_policy(self, subject: Any) -> bool:
        return self.policy_for(subject) is not None

    def items(self) -> Tuple[Tuple[type, Any], ...]:
        return tuple(self._policies.items())

    def reset(self) -> None:
        """Remove every registration (useful for testing)."""
        self._policies.clear()

    def __contains__(self, subject_type: type) -> bool:
        return subject_type in self._policies

    def __len__(self) -> int:
        return len(self._policies)
