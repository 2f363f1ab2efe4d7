"""
Pytest configuration and shared fixtures for FastGate tests.
"""

import pytest
from faker import Faker

from fast_gate import Gate
from tests.support import User

fake = Faker()


@pytest.fixture
def gate():
    """Provide a fresh gate per test."""
    return Gate()


@pytest.fixture
def user():
    return User(id=fake.random_int(min=1, max=1000), name=fake.name())


@pytest.fixture
def admin():
    return User(id=fake.random_int(min=1001, max=2000), name=fake.name(), is_admin=True)


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']
