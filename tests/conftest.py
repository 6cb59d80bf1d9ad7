# tests/conftest.py
import threading

import pytest

from app import create_app
from src.config import TestingConfig
from src.models import db, Subscription
from src.services.errors import CommitError, TransactionOpenError, WriteError


# -----------------------------
# Fake store
# -----------------------------
class FakeUnitOfWork:
    def __init__(self, store):
        self.store = store
        self.pending = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def write(self, row):
        with self.store.lock:
            self.store.write_calls += 1
            n = self.store.write_calls
        if self.store.fail_on_write is not None and n == self.store.fail_on_write:
            raise WriteError(f"simulated failure on write #{n}")
        self.pending.append(row)

    def commit(self):
        if self.store.fail_on_commit:
            raise CommitError("simulated commit failure")
        with self.store.lock:
            self.store.rows.extend(self.pending)
            self.store.commits += 1
        self.committed = True

    def rollback(self):
        self.pending = []
        self.rolled_back = True
        with self.store.lock:
            self.store.rollbacks += 1

    def close(self):
        self.closed = True


class FakeStore:
    """In-memory store: rows only become visible on commit."""

    def __init__(self, fail_on_begin=False, fail_on_write=None, fail_on_commit=False):
        self.fail_on_begin = fail_on_begin
        self.fail_on_write = fail_on_write
        self.fail_on_commit = fail_on_commit
        self.lock = threading.Lock()
        self.rows = []
        self.units = []
        self.begins = 0
        self.write_calls = 0
        self.commits = 0
        self.rollbacks = 0

    def begin(self):
        with self.lock:
            self.begins += 1
        if self.fail_on_begin:
            raise TransactionOpenError("simulated: database unavailable")
        uow = FakeUnitOfWork(self)
        with self.lock:
            self.units.append(uow)
        return uow


@pytest.fixture
def fake_store():
    return FakeStore()


# -----------------------------
# Flask apps
# -----------------------------
@pytest.fixture
def test_config(tmp_path):
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'subscriptions.db'}"

    return _Config


@pytest.fixture
def app(test_config):
    """App wired to a real SQLite database."""
    app = create_app(test_config)
    yield app
    with app.app_context():
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_fake_app(test_config):
    def _make(store):
        return create_app(test_config, store=store)

    return _make


@pytest.fixture
def stored_rows(app):
    def _rows(user_id=None):
        with app.app_context():
            query = db.select(Subscription).order_by(Subscription.id)
            if user_id is not None:
                query = query.filter_by(user_id=user_id)
            rows = db.session.execute(query).scalars().all()
            return [(r.user_id, r.county, r.town, r.created_at) for r in rows]

    return _rows
