import pytest
from datetime import datetime
from bson import ObjectId
from fastapi.testclient import TestClient

from backend.app import create_app
from config.settings import Settings
from core.clock import FixedClock
from core.database import DocumentStore


class FakeSession:
    def __init__(self, fail_on_end=None):
        self.ended = False
        self._fail_on_end = fail_on_end

    def end_session(self):
        if self._fail_on_end is not None:
            raise self._fail_on_end
        self.ended = True


class FakeCollection:
    """In-memory stand-in for a pymongo Collection supporting the filters the service builds."""

    def __init__(self, name):
        self.name = name
        self.documents = []
        self.find_calls = []
        self.fail_with = None

    def insert_many(self, documents):
        for doc in documents:
            doc = dict(doc)
            doc.setdefault("_id", ObjectId())
            self.documents.append(doc)

    def find(self, filter=None, sort=None, session=None):
        self.find_calls.append({"filter": filter, "sort": sort, "session": session})
        if self.fail_with is not None:
            raise self.fail_with
        matches = [dict(doc) for doc in self.documents if _matches(doc, filter or {})]
        for field, direction in reversed(sort or []):
            matches.sort(key=lambda doc: doc[field], reverse=direction == -1)
        return iter(matches)


def _matches(doc, flt):
    for field, cond in flt.items():
        value = doc.get(field)
        if isinstance(cond, dict):
            for op, operand in cond.items():
                if op == "$gte":
                    ok = value is not None and value >= operand
                elif op == "$lte":
                    ok = value is not None and value <= operand
                elif op == "$in":
                    values = value if isinstance(value, list) else [value]
                    ok = any(v in operand for v in values)
                else:
                    raise NotImplementedError(op)
                if not ok:
                    return False
        elif isinstance(value, list):
            if cond not in value:
                return False
        elif value != cond:
            return False
    return True


class FakeDatabase:
    def __init__(self, name):
        self.name = name
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeAdmin:
    def __init__(self):
        self.fail_with = None

    def command(self, name):
        if self.fail_with is not None:
            raise self.fail_with
        return {"ok": 1.0}


class FakeMongoClient:
    """Records every session it hands out so tests can check for leaks."""

    def __init__(self):
        self.databases = {}
        self.sessions = []
        self.admin = FakeAdmin()
        self.closed = False
        self.fail_on_start = None
        self.fail_on_end = None

    def __getitem__(self, name):
        if name not in self.databases:
            self.databases[name] = FakeDatabase(name)
        return self.databases[name]

    def start_session(self):
        if self.fail_on_start is not None:
            raise self.fail_on_start
        session = FakeSession(self.fail_on_end)
        self.sessions.append(session)
        return session

    def close(self):
        self.closed = True


@pytest.fixture
def now():
    return datetime(2024, 1, 10, 12, 0)


@pytest.fixture
def clock(now):
    return FixedClock(now)


@pytest.fixture
def mongo_client():
    return FakeMongoClient()


@pytest.fixture
def trades_db(mongo_client):
    return mongo_client["trades"]


@pytest.fixture
def store(mongo_client):
    return DocumentStore(mongo_client, "trades")


@pytest.fixture
def settings():
    return Settings(tradedb_uri="mongodb://localhost:27017", log_dir="")


@pytest.fixture
def app(settings, store, clock):
    return create_app(settings=settings, store=store, clock=clock)


@pytest.fixture
def client(app):
    return TestClient(app)
