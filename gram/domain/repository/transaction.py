"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Unit of work spanning several repository calls.

    Everything written through the repositories inside ``transaction()``
    is applied together, or not at all if the block raises.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an all-or-nothing scope.

        Usage:
            async with transaction_manager.transaction():
                await like_repository.save_if_absent(like)
                await post_repository.increment_like_count(post_id)
        """
        pass
