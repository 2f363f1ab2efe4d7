import sys

import pytest

from fast_gate import Gate, Policy, policy
from fast_gate.app_provider import boot, reset_boot
from fast_gate.decorators.policy_decorators import resolve_policy_subject
from fast_gate.utils.autodiscovery import autodiscover_policies


@pytest.fixture
def project(tmp_path, monkeypatch):
    app_dir = tmp_path / "app"
    models_dir = app_dir / "models"
    policies_dir = app_dir / "policies"
    for d in (app_dir, models_dir, policies_dir):
        d.mkdir()
        (d / "__init__.py").write_text("")

    (models_dir / "post.py").write_text(
        "class Post:\n"
        "    def __init__(self, author_id):\n"
        "        self.author_id = author_id\n"
        "class Comment:\n"
        "    pass\n"
    )

    (policies_dir / "post_policy.py").write_text(
        "from fast_gate import Policy, policy\n"
        "from app.models.post import Post\n"
        "@policy(Post)\n"
        "class PostPolicy(Policy):\n"
        "    def update(self, user, post):\n"
        "        return post.author_id == user\n"
        "class NotRegisteredPolicy(Policy):\n"
        "    pass\n"
    )

    (policies_dir / "comment_policy.py").write_text(
        "from fast_gate import Policy, policy\n"
        "def _comment():\n"
        "    from app.models.post import Comment\n"
        "    return Comment\n"
        "@policy(_comment)\n"
        "class CommentPolicy(Policy):\n"
        "    def view(self, user, comment):\n"
        "        return True\n"
    )

    sys.path.insert(0, str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENV", raising=False)
    reset_boot()
    try:
        yield tmp_path
    finally:
        sys.path.remove(str(tmp_path))
        for mod in list(sys.modules):
            if mod == "app" or mod.startswith("app."):
                sys.modules.pop(mod, None)
        reset_boot()


def test_autodiscover_policies_resolves_forward_references(project):
    pairs = autodiscover_policies("app.policies")

    names = sorted((subject.__name__, type(instance).__name__) for subject, instance in pairs)
    assert names == [("Comment", "CommentPolicy"), ("Post", "PostPolicy")]


def test_autodiscover_missing_package_returns_empty(project):
    assert autodiscover_policies("app.nothing_here") == []


@pytest.mark.asyncio
async def test_boot_registers_discovered_policies(project):
    gate = Gate()
    assert boot(gate=gate, policies_package="app.policies") is gate

    from app.models.post import Comment, Post

    assert type(gate.policy_for(Post)).__name__ == "PostPolicy"
    assert type(gate.policy_for(Comment())).__name__ == "CommentPolicy"

    with gate.acting_as(7):
        assert await gate.allows("update", [Post(author_id=7)])

    # Booting again does not register twice
    boot(gate=gate, policies_package="app.policies")
    assert len(gate.policies) == 2


def test_boot_with_explicit_policies_only(project):
    class Thing:
        pass

    class ThingPolicy(Policy):
        pass

    gate = Gate()
    instance = ThingPolicy()
    boot(gate=gate, autodiscovery=False, policies=[(Thing, instance)])

    assert gate.policy_for(Thing()) is instance
    assert len(gate.policies) == 1


def test_policy_decorator_marks_subject():
    class Invoice:
        pass

    @policy(lambda: Invoice)
    class InvoicePolicy(Policy):
        pass

    assert resolve_policy_subject(InvoicePolicy) is Invoice
