# src/services/subscription_writer.py

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from src.models.request_model import SubscriptionRequest
from src.services.errors import StoreError
from src.services.subscription_store import SubscriptionStore

logger = logging.getLogger(__name__)


class WriteState(str, Enum):
    RECEIVED = "received"
    DECODED = "decoded"
    TRANSACTION_OPEN = "transaction_open"
    WRITING = "writing"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class SubscriptionRow:
    user_id: str
    region: str
    sub_region: str
    created_at: datetime


@dataclass
class WriteOutcome:
    success: bool
    state: WriteState
    rows_written: int = 0
    created_at: Optional[datetime] = None
    error: Optional[StoreError] = None


def flatten_subscriptions(request: SubscriptionRequest, now: datetime) -> List[SubscriptionRow]:
    """Expand region -> [sub_region] into one row per pair, all stamped with ``now``."""
    return [
        SubscriptionRow(request.user_id, region, sub_region, now)
        for region, sub_regions in request.subscriptions.items()
        for sub_region in sub_regions
    ]


class SubscriptionWriter:
    """
    Persist one decoded request as a single all-or-nothing transaction.

    The store is injected; the writer keeps no state between calls, so one
    instance can serve concurrent requests.
    """

    def __init__(self, store: SubscriptionStore, clock: Callable[[], datetime] = datetime.utcnow):
        self.store = store
        self.clock = clock

    def handle(self, request: SubscriptionRequest) -> WriteOutcome:
        now = self.clock()
        rows = flatten_subscriptions(request, now)

        try:
            uow = self.store.begin()
        except StoreError as e:
            logger.error(f"❌ Could not open transaction for user {request.user_id}: {e}")
            return WriteOutcome(False, WriteState.ABORTED, created_at=now, error=e)

        state = WriteState.TRANSACTION_OPEN
        written = 0
        try:
            state = WriteState.WRITING
            for row in rows:
                uow.write(row)
                written += 1
            uow.commit()
        except StoreError as e:
            uow.rollback()
            logger.error(
                f"❌ Aborted subscriptions for user {request.user_id} while {state.value} "
                f"after {written}/{len(rows)} rows ({type(e).__name__}): {e}"
            )
            return WriteOutcome(False, WriteState.ABORTED, created_at=now, error=e)
        except BaseException:
            # e.g. the request was interrupted by a deadline; never leave it open
            uow.rollback()
            raise
        finally:
            uow.close()

        logger.info(f"✅ Stored {written} subscriptions for user {request.user_id}")
        return WriteOutcome(True, WriteState.COMMITTED, rows_written=written, created_at=now)
