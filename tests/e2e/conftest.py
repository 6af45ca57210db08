"""Fixtures for HTTP tests against an app backed by in-memory persistence."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from gram.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by the app and the seeding helpers."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client whose app resolves dependencies from container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def seed(container):
    """Run an async seeding function against the app's store.

    Usage:
        author = seed(lambda env: make_user(env))
    """

    def _seed(fn):
        async def _run():
            async with container() as env:
                return await fn(env)

        return asyncio.run(_run())

    return _seed
