"""Sample principal and subject classes shared by the tests."""

from fast_gate import Authorizable


class User(Authorizable):
    def __init__(self, id: int, name: str, is_admin: bool = False):
        self.id = id
        self.name = name
        self.is_admin = is_admin

    def __repr__(self):
        return f"User(id={self.id!r})"


class Post:
    def __init__(self, author_id: int, title: str = "Hello"):
        self.author_id = author_id
        self.title = title


class DraftPost(Post):
    pass


class Comment:
    def __init__(self, author_id: int):
        self.author_id = author_id
