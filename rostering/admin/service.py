# rostering/admin/service.py
import logging
from typing import Protocol, Sequence

from ..entities.service import TransactionFactory
from ..storage.sqlite_base import sqlite_transaction

logger = logging.getLogger(__name__)


class ClearableStore(Protocol):
    async def clear(self) -> int: ...


class AdminResetService:
    """
    Wipes all persisted state across every tenant and entity kind.

    The store handles are passed in explicitly. They are cleared inside one
    transaction, so callers see either every store emptied or, on failure,
    nothing changed.
    """

    def __init__(
        self,
        stores: Sequence[ClearableStore],
        transaction: TransactionFactory = sqlite_transaction
    ):
        self.stores = list(stores)
        self.transaction = transaction

    async def reset_application(self) -> None:
        """Clear every registered store. Failures propagate after the rollback."""
        logger.info(f"Admin: Resetting application ({len(self.stores)} stores)")
        removed = 0
        async with self.transaction():
            for store in self.stores:
                removed += await store.clear()
        logger.info(f"Admin: Application reset complete, {removed} records removed")
