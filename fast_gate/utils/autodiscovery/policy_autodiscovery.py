import importlib
import importlib.util
import inspect
import logging
import pkgutil
from typing import Any, List, Optional, Tuple

from fast_gate.decorators.policy_decorators import resolve_policy_subject


def autodiscover_policies(package: Optional[str] = None) -> List[Tuple[type, Any]]:
    """
    Autodiscover `@policy` decorated classes in a package and instantiate them.

    Example layout:
    ```
    - app/policies/post_policy.py -> @policy(Post) class PostPolicy(Policy)
    - app/policies/comment_policy.py -> @policy(lambda: Comment) class CommentPolicy(Policy)
    ```

    Args:
        package: Dotted package name to scan. Defaults to `GATE_POLICIES_PACKAGE`.

    Returns:
        (subject class, policy instance) pairs in discovery order
    """
    from fast_gate import config

    package = package or config.GATE_POLICIES_PACKAGE

    # Check the package exists first so inner import errors are not misreported
    try:
        spec = importlib.util.find_spec(package)
    except ModuleNotFoundError:
        spec = None

    if spec is None:
        logging.info(f"📁 No {package} package found, skipping policy autodiscovery")
        return []

    root = importlib.import_module(package)
    module_names = [package]
    if hasattr(root, "__path__"):
        module_names.extend(
            name for _, name, _ in sorted(pkgutil.walk_packages(root.__path__, prefix=f"{package}."), key=lambda m: m[1])
        )

    discovered: List[Tuple[type, Any]] = []
    for module_name in module_names:
        module = importlib.import_module(module_name)
        for class_name, policy_cls in inspect.getmembers(module, inspect.isclass):
            if policy_cls.__module__ != module_name or "__policy_subject__" not in vars(policy_cls):
                continue

            subject = resolve_policy_subject(policy_cls)
            discovered.append((subject, policy_cls()))
            logging.debug(f"✅ Discovered {class_name} for {subject.__name__}")

    if discovered:
        logging.debug(f"🎉 Policy autodiscovery completed! Found {len(discovered)} policy(ies)")

    return discovered
