"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from gram.domain.repository.transaction import TransactionManager

from .store import InMemoryStore


class InMemoryTransactionManager(TransactionManager):
    """Serializes transactions on the store lock and rolls back on error."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._store.lock:
            snapshot = self._store.snapshot()
            try:
                yield
            except BaseException:
                self._store.restore(snapshot)
                raise
