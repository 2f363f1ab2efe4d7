import re
from typing import Iterable, Union


def format_ability_to_method(ability: str) -> str:
    """
    Format an ability name into a policy method name.

    Only names containing a hyphen are transformed: they are lower-cased, split on
    runs of hyphens, underscores and whitespace, and joined camel-style.
    Anything else is returned verbatim, so ``publish_post`` stays ``publish_post``.

    Example:
        create-post -> createPost
        publishPost -> publishPost
    """
    if '-' not in ability:
        return ability

    words = re.split(r'[-_\s]+', ability.lower())
    return words[0] + ''.join(word[:1].upper() + word[1:] for word in words[1:])


def normalise_abilities(abilities: Union[str, Iterable[str]]) -> list[str]:
    if isinstance(abilities, str):
        return [abilities]
    return list(abilities)


# Policy members that are never ability methods
RESERVED_POLICY_MEMBERS = frozenset({"before", "method_for"})


def is_ability_method_name(name: str) -> bool:
    return bool(name) and not name.startswith("_") and name not in RESERVED_POLICY_MEMBERS
