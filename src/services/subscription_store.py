# src/services/subscription_store.py

"""
Relational persistence for subscription rows.

A store hands out one unit of work (a pooled connection plus an open
transaction) per request. The writer never talks to SQLAlchemy directly,
so tests can swap in an in-memory store.
"""

import logging
from typing import Protocol

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from src.models.subscription_model import Subscription
from src.services.errors import CommitError, TransactionOpenError, WriteError

logger = logging.getLogger(__name__)


class UnitOfWork(Protocol):
    def write(self, row) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

    def close(self) -> None: ...


class SubscriptionStore(Protocol):
    def begin(self) -> UnitOfWork: ...


class SqlAlchemyUnitOfWork:
    """One connection and one transaction, used for a single request."""

    def __init__(self, connection, transaction):
        self.connection = connection
        self.transaction = transaction
        self._statement = insert(Subscription.__table__)

    def write(self, row):
        try:
            self.connection.execute(
                self._statement,
                {
                    "user_id": row.user_id,
                    "county": row.region,
                    "town": row.sub_region,
                    "created_at": row.created_at,
                },
            )
        except SQLAlchemyError as e:
            raise WriteError(f"insert failed for {row.region}/{row.sub_region}: {e}") from e

    def commit(self):
        try:
            self.transaction.commit()
        except SQLAlchemyError as e:
            raise CommitError(f"commit failed: {e}") from e

    def rollback(self):
        if not self.transaction.is_active:
            return
        try:
            self.transaction.rollback()
        except SQLAlchemyError as e:
            logger.error(f"❌ Rollback failed: {e}")

    def close(self):
        try:
            self.connection.close()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to release connection: {e}")


class SqlAlchemySubscriptionStore:
    """Store backed by the Flask-SQLAlchemy engine's connection pool.

    The engine is resolved lazily on every ``begin`` because Flask-SQLAlchemy
    only exposes it inside an application context.
    """

    def __init__(self, db):
        self.db = db

    def begin(self) -> SqlAlchemyUnitOfWork:
        try:
            connection = self.db.engine.connect()
        except SQLAlchemyError as e:
            raise TransactionOpenError(f"could not acquire a connection: {e}") from e
        try:
            transaction = connection.begin()
        except SQLAlchemyError as e:
            connection.close()
            raise TransactionOpenError(f"could not begin a transaction: {e}") from e
        return SqlAlchemyUnitOfWork(connection, transaction)
