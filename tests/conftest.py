from __future__ import annotations

import copy
import logging
from types import SimpleNamespace
from typing import Any

import pytest
from pymongo.errors import PyMongoError


_MISSING = object()


def _get_path(doc: Any, path: str) -> Any:
    cur = doc
    for key in path.split("."):
        if not isinstance(cur, dict) or key not in cur:
            return _MISSING
        cur = cur[key]
    return cur


def _set_path(doc: dict, path: str, value: Any) -> None:
    keys = path.split(".")
    cur = doc
    for key in keys[:-1]:
        cur = cur.setdefault(key, {})
    cur[keys[-1]] = value


def _matches(doc: dict, query: dict) -> bool:
    for key, expected in query.items():
        if key == "$or":
            if not any(_matches(doc, sub) for sub in expected):
                return False
        elif _get_path(doc, key) != expected:
            return False
    return True


class FakeCollection:
    """Just enough of pymongo's Collection for find / update_one / find_one."""

    def __init__(self, docs: list[dict] | None = None) -> None:
        self.docs = [copy.deepcopy(d) for d in (docs or [])]
        self.calls: list[tuple[str, Any]] = []
        self.fail_on: dict[str, PyMongoError] = {}

    def _maybe_fail(self, op: str) -> None:
        if op in self.fail_on:
            raise self.fail_on[op]

    def find(self, query: dict):
        self.calls.append(("find", query))
        self._maybe_fail("find")
        return [copy.deepcopy(d) for d in self.docs if _matches(d, query)]

    def find_one(self, query: dict):
        self.calls.append(("find_one", query))
        self._maybe_fail("find_one")
        for d in self.docs:
            if _matches(d, query):
                return copy.deepcopy(d)
        return None

    def update_one(self, query: dict, update: dict):
        self.calls.append(("update_one", (query, update)))
        self._maybe_fail("update_one")
        for d in self.docs:
            if _matches(d, query):
                modified = 0
                for path, value in update["$set"].items():
                    if _get_path(d, path) != value:
                        _set_path(d, path, value)
                        modified = 1
                return SimpleNamespace(matched_count=1, modified_count=modified)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def op_names(self) -> list[str]:
        return [name for name, _ in self.calls]


class FakeAdmin:
    def __init__(self, client: "FakeClient") -> None:
        self.client = client

    def command(self, name: str):
        self.client.pinged = True
        if self.client.ping_error is not None:
            raise self.client.ping_error
        return {"ok": 1.0}


class FakeClient:
    def __init__(self, collection: FakeCollection) -> None:
        self.collection = collection
        self.admin = FakeAdmin(self)
        self.ping_error: PyMongoError | None = None
        self.pinged = False
        self.closed = False
        self.opened_with: list[str] = []
        self.accessed: list[tuple[str, str]] = []

    def __call__(self, uri: str) -> "FakeClient":
        # used directly as the client_factory
        self.opened_with.append(uri)
        return self

    def __getitem__(self, db_name: str):
        client = self

        class _Db:
            def __getitem__(self, col_name: str) -> FakeCollection:
                client.accessed.append((db_name, col_name))
                return client.collection

        return _Db()

    def close(self) -> None:
        self.closed = True


PREFERRED_ID = "775a846c8c5442458ea4860111b28c57"


def make_record(_id: str, slug: str, nested_slug: bool = True) -> dict:
    doc = {
        "_id": _id,
        "data": {
            "en": {"application_link": {"value": "https://old-link.com"}},
            "ta": {"media": {"video": "https://www.youtube.com/watch?v=old"}},
        },
    }
    if nested_slug:
        doc["filter"] = {"slug": slug}
    else:
        doc["slug"] = slug
    return doc


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection([make_record("a1b2c3", "fpktnk.json")])


@pytest.fixture
def client(collection: FakeCollection) -> FakeClient:
    return FakeClient(collection)


@pytest.fixture
def environ() -> dict:
    return {"MONGO_URI": "mongodb://localhost:27017"}


@pytest.fixture(autouse=True)
def _restore_root_log_level():
    # the entry points call setup_logging(), which sets the root level
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
