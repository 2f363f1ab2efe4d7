import pytest

from fast_gate.utils.ability_utils import format_ability_to_method, is_ability_method_name, normalise_abilities


@pytest.mark.parametrize(
    "ability, method",
    [
        ("create-post", "createPost"),
        ("Create-Blog-Post", "createBlogPost"),
        ("view-any_post", "viewAnyPost"),
        ("force - delete", "forceDelete"),
        ("createPost", "createPost"),
        ("publish_post", "publish_post"),
        ("update", "update"),
    ],
)
def test_format_ability_to_method(ability, method):
    assert format_ability_to_method(ability) == method


def test_normalise_abilities():
    assert normalise_abilities("view") == ["view"]
    assert normalise_abilities(("view", "update")) == ["view", "update"]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("update", True),
        ("createPost", True),
        ("before", False),
        ("method_for", False),
        ("_secret", False),
        ("__init__", False),
        ("", False),
    ],
)
def test_is_ability_method_name(name, expected):
    assert is_ability_method_name(name) is expected
