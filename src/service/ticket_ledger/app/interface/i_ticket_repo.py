from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticket_ledger.domain.entity.ticket_entity import Ticket


class ITicketRepo(ABC):
    """Ticket Registry store; ticket ids are global across all events."""

    @abstractmethod
    async def get_by_id(self, *, ticket_id: int) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def allocate_id(self) -> int:
        pass

    @abstractmethod
    async def last_id(self) -> int:
        pass

    @abstractmethod
    async def save(self, *, ticket: Ticket) -> Ticket:
        pass
