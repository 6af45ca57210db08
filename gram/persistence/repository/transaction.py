"""PostgreSQL transaction manager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from gram.domain.repository.transaction import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Runs a unit of work in a SAVEPOINT of the request session.

    The request-scoped session commits when the request finishes; the
    savepoint guarantees a failed unit of work leaves nothing behind even
    if the request itself carries on.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
