from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticket_ledger.domain.entity.organizer_account_entity import OrganizerAccount


class IOrganizerAccountRepo(ABC):
    @abstractmethod
    async def get(self, *, organizer: str) -> Optional[OrganizerAccount]:
        pass

    @abstractmethod
    async def save(self, *, account: OrganizerAccount) -> OrganizerAccount:
        pass
