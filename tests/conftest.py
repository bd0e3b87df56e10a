# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from mytasks.main import app, get_store
from mytasks.store import TaskStore

from .fakes import FakeRedis


@pytest.fixture()
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture()
def store(fake_redis: FakeRedis) -> TaskStore:
    return TaskStore(fake_redis, key="my-tasks")


@pytest.fixture()
def client(store: TaskStore) -> Iterator[TestClient]:
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
