from typing import Any, Iterable, Optional, Tuple, TYPE_CHECKING

import os
import sys
import weakref

from fast_gate.utils.autodiscovery.policy_autodiscovery import autodiscover_policies
from fast_gate.utils.env_utils import configure_env
from fast_gate.utils.logging import setup_logging

if TYPE_CHECKING:
    from fast_gate.core.gate import Gate

_booted_gates: "weakref.WeakSet[Gate]" = weakref.WeakSet()


def boot(*,
    autodiscovery: bool = True,
    policies: Optional[Iterable[Tuple[type, Any]]] = None,
    policies_package: Optional[str] = None,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    gate: Optional['Gate'] = None,
) -> 'Gate':
    """
    Sets up the gate.
    - Loads environment variables
    - Sets up logging
    - Registers the given policies, then autodiscovered ones if enabled

    Booting the same gate twice is a no-op.

    Args:
        autodiscovery: Whether to scan `policies_package` for `@policy` classes.
        policies: Explicit (subject class, policy instance) pairs.
        policies_package: Package to scan. Defaults to `GATE_POLICIES_PACKAGE`.
        gate: Gate to configure. Defaults to the package gate.
    """
    if gate is None:
        from fast_gate.core.gate import gate

    if gate in _booted_gates:
        return gate

    # Ensure project root is importable so policy packages can be resolved
    project_root = os.environ.get("PROJECT_ROOT") or os.getcwd()
    if project_root and project_root not in sys.path:
        sys.path.insert(0, project_root)

    configure_env(env_file_name)
    setup_logging(log_file_name)

    if policies is not None:
        gate.register_policies(policies)

    if autodiscovery:
        gate.register_policies(autodiscover_policies(policies_package))

    _booted_gates.add(gate)
    return gate


def reset_boot() -> None:
    """Forget which gates were booted (useful for testing)."""
    _booted_gates.clear()
