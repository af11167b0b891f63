"""Shared test configuration: fake connection settings and an in-memory MongoDB."""

import copy
import json
import os
from pathlib import Path
from unittest.mock import MagicMock

import mongomock
import pytest

# Never point the suite at a real server
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/schools_test")

from api import _db  # noqa: E402

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def schools_fixture():
    with open(FIXTURES / "schools.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture(autouse=True)
def client_factory(monkeypatch, mongo_client):
    """Route the shim's MongoClient at mongomock and start each test disconnected."""
    factory = MagicMock(return_value=mongo_client)
    monkeypatch.setattr(_db, "MongoClient", factory)
    _db.reset_client()
    yield factory
    _db.reset_client()


@pytest.fixture
def collection(schools_fixture):
    """The shared schools collection, seeded with the fixture documents."""
    coll = _db.get_schools_collection()
    coll.insert_many(copy.deepcopy(schools_fixture))
    return coll


@pytest.fixture
def failing_collection():
    coll = MagicMock()
    coll.find.side_effect = RuntimeError("Database error")
    coll.find_one.side_effect = RuntimeError("Database error")
    return coll
