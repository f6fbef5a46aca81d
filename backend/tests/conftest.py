"""
Showcase Backend - Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The application gets an in-memory FakeDocumentStore instead of a
       MongoDB client, injected through create_app(store=...).

Fixture Hierarchy:
    Function-scoped (fresh for each test):
    ├── store:          FakeDocumentStore with empty collections
    ├── test_client:    HTTPX AsyncClient bound to an app using `store`
    └── sample_artwork: the "Sunset" artwork body
"""

import copy
import os
import re
from typing import Any, Dict, List, Mapping, Optional

# Settings are read at import time; keep tests off any real cluster.
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from showcase.exceptions import StoreUnavailableError


# ══════════════════════════════════════════════════════════════════════════
# In-memory document store
# ══════════════════════════════════════════════════════════════════════════

_MISSING = object()


def _match_value(value: Any, condition: Any) -> bool:
    if isinstance(condition, dict) and any(key.startswith("$") for key in condition):
        for op, arg in condition.items():
            if op == "$options":
                continue
            if op == "$regex":
                flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
                if not isinstance(value, str) or re.search(arg, value, flags) is None:
                    return False
            elif op == "$in":
                if value is _MISSING or value not in arg:
                    return False
            else:
                raise NotImplementedError(f"operator {op} is not supported by the fake store")
        return True
    if value is _MISSING:
        return condition is None
    return value == condition


def matches(document: Mapping[str, Any], query: Mapping[str, Any]) -> bool:
    """Evaluate the subset of the MongoDB query language the app emits."""
    for key, condition in query.items():
        if key == "$and":
            if not all(matches(document, clause) for clause in condition):
                return False
        elif key == "$or":
            if not any(matches(document, clause) for clause in condition):
                return False
        elif not _match_value(document.get(key, _MISSING), condition):
            return False
    return True


def apply_update(document: Dict[str, Any], update: Mapping[str, Any]) -> None:
    for op, fields in update.items():
        if op == "$inc":
            for key, amount in fields.items():
                document[key] = document.get(key, 0) + amount
        elif op == "$set":
            document.update(copy.deepcopy(fields))
        else:
            raise NotImplementedError(f"update operator {op} is not supported by the fake store")


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """
    Async collection with the pymongo method names used by the services.

    Set `error` to make every subsequent call raise it.
    """

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None
        self.queries: List[Mapping[str, Any]] = []

    def _check(self, query: Optional[Mapping[str, Any]] = None) -> None:
        if query is not None:
            self.queries.append(query)
        if self.error is not None:
            raise self.error

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self._check()
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    def find(self, query: Optional[Mapping[str, Any]] = None) -> FakeCursor:
        self._check(query or {})
        found = [copy.deepcopy(doc) for doc in self.documents if matches(doc, query or {})]
        return FakeCursor(found)

    async def find_one(self, query: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        self._check(query)
        for doc in self.documents:
            if matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def update_one(self, query: Mapping[str, Any], update: Mapping[str, Any]) -> UpdateResult:
        self._check(query)
        for doc in self.documents:
            if matches(doc, query):
                before = copy.deepcopy(doc)
                apply_update(doc, update)
                return UpdateResult({"n": 1, "nModified": int(before != doc), "ok": 1.0}, True)
        return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)

    async def delete_one(self, query: Mapping[str, Any]) -> DeleteResult:
        self._check(query)
        for index, doc in enumerate(self.documents):
            if matches(doc, query):
                del self.documents[index]
                return DeleteResult({"n": 1, "ok": 1.0}, True)
        return DeleteResult({"n": 0, "ok": 1.0}, True)

    async def count_documents(self, query: Mapping[str, Any]) -> int:
        self._check(query)
        return sum(1 for doc in self.documents if matches(doc, query))


class FakeDocumentStore:
    """Drop-in for showcase.database.DocumentStore."""

    def __init__(self):
        self.artworks = FakeCollection("adds")
        self.favorites = FakeCollection("favorites")
        self.reachable = True
        self.closed = False

    async def ping(self) -> bool:
        if not self.reachable:
            raise StoreUnavailableError(context={"operation": "ping"})
        return True

    async def close(self) -> None:
        self.closed = True


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def sample_artwork():
    return {
        "title": "Sunset",
        "userName": "ana",
        "userEmail": "ana@example.com",
        "category": "painting",
        "visibility": "Public",
        "likes": 0,
        "image": "https://i.ibb.co/sunset.jpg",
    }


@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient talking to an app wired to the fake store.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from showcase.main import create_app

    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
