import pytest

from fast_gate import AuthorizationException, Authorizable, Gate, Policy, authorizable, current_principal

from tests.support import Post, User


class PostPolicy(Policy):
    def update(self, user, post):
        return post.author_id == user.id

    def create(self, user):
        return current_principal() is user


@pytest.fixture
def scoped_user(gate):
    class GateUser(User):
        pass

    GateUser.gate = gate
    gate.register_policy(Post, PostPolicy())
    return GateUser(id=5, name="Ada")


@pytest.mark.asyncio
async def test_can_and_cannot(scoped_user):
    assert await scoped_user.can("update", Post(author_id=5))
    assert await scoped_user.cannot("update", Post(author_id=6))
    assert await scoped_user.can("create", Post)


@pytest.mark.asyncio
async def test_can_any(scoped_user):
    assert await scoped_user.can_any(["delete", "update"], Post(author_id=5))
    assert not await scoped_user.can_any(["delete"], Post(author_id=5))


@pytest.mark.asyncio
async def test_authorize_raises_for_denied(scoped_user):
    assert (await scoped_user.authorize("update", Post(author_id=5))).allowed

    with pytest.raises(AuthorizationException) as exc_info:
        await scoped_user.authorize("update", Post(author_id=6))

    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_principal_scope_ends_after_check(scoped_user):
    await scoped_user.can("create", Post)
    assert current_principal() is None


def test_authorizable_decorator_adds_mixin():
    @authorizable
    class Member:
        def __init__(self, id):
            self.id = id

    member = Member(1)
    assert isinstance(member, Authorizable)
    assert Member.__name__ == "Member"
    assert authorizable(Member) is Member


@pytest.mark.asyncio
async def test_authorizable_uses_default_gate_when_none_set():
    from fast_gate import gate as default_gate

    @authorizable
    class Member:
        pass

    default_gate.define("member-ping", lambda u: isinstance(u, Member))
    try:
        assert await Member().can("member-ping")
    finally:
        default_gate.reset()

    assert isinstance(default_gate, Gate)
