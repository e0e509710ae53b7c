"""
Staged writes for the in-memory unit of work

Reads see staged values first, then committed ones. flush() publishes staged
values to the committed store; discard() drops them.
"""

from typing import Callable, Generic, Optional, TypeVar

from src.service.ticket_ledger.driven_adapter.state.in_memory_ledger_state import (
    SequentialIdAllocator,
)


K = TypeVar('K')
V = TypeVar('V')


class StagedTable(Generic[K, V]):
    def __init__(self, committed: dict[K, V]) -> None:
        self._committed = committed
        self._staged: dict[K, V] = {}

    def get(self, key: K) -> Optional[V]:
        if key in self._staged:
            return self._staged[key]
        return self._committed.get(key)

    def put(self, key: K, value: V) -> None:
        self._staged[key] = value

    def flush(self) -> None:
        self._committed.update(self._staged)
        self._staged.clear()

    def discard(self) -> None:
        self._staged.clear()


class StagedValue(Generic[V]):
    def __init__(self, *, load: Callable[[], V], store: Callable[[V], None]) -> None:
        self._load = load
        self._store = store
        self._staged: Optional[V] = None

    def get(self) -> V:
        return self._staged if self._staged is not None else self._load()

    def put(self, value: V) -> None:
        self._staged = value

    def flush(self) -> None:
        if self._staged is not None:
            self._store(self._staged)
        self._staged = None

    def discard(self) -> None:
        self._staged = None


class StagedIdAllocator:
    """Ids handed out inside a transaction are only consumed when it commits."""

    def __init__(self, allocator: SequentialIdAllocator) -> None:
        self._allocator = allocator
        self._pending_last_id = allocator.last_id

    def allocate(self) -> int:
        self._pending_last_id += 1
        return self._pending_last_id

    def last_id(self) -> int:
        return self._pending_last_id

    def flush(self) -> None:
        self._allocator.last_id = self._pending_last_id

    def discard(self) -> None:
        self._pending_last_id = self._allocator.last_id
