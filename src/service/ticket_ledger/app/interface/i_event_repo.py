from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticket_ledger.domain.entity.event_entity import Event


class IEventRepo(ABC):
    """Event Registry store; owns the sequential event id allocator."""

    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        pass

    @abstractmethod
    async def allocate_id(self) -> int:
        """Reserve the next event id; released again if the transaction rolls back."""
        pass

    @abstractmethod
    async def last_id(self) -> int:
        pass

    @abstractmethod
    async def save(self, *, event: Event) -> Event:
        pass
