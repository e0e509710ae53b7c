from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticket_ledger.domain.entity.user_ticket_index_entity import UserTicketIndex


class IUserTicketIndexRepo(ABC):
    @abstractmethod
    async def get(self, *, owner: str) -> Optional[UserTicketIndex]:
        pass

    @abstractmethod
    async def save(self, *, index: UserTicketIndex) -> UserTicketIndex:
        pass
