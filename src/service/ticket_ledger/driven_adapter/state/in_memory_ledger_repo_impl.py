from typing import Optional

from src.service.ticket_ledger.app.interface.i_event_repo import IEventRepo
from src.service.ticket_ledger.app.interface.i_organizer_account_repo import (
    IOrganizerAccountRepo,
)
from src.service.ticket_ledger.app.interface.i_platform_config_repo import IPlatformConfigRepo
from src.service.ticket_ledger.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticket_ledger.app.interface.i_user_ticket_index_repo import (
    IUserTicketIndexRepo,
)
from src.service.ticket_ledger.domain.entity.event_entity import Event
from src.service.ticket_ledger.domain.entity.organizer_account_entity import OrganizerAccount
from src.service.ticket_ledger.domain.entity.platform_config_entity import PlatformConfig
from src.service.ticket_ledger.domain.entity.ticket_entity import Ticket
from src.service.ticket_ledger.domain.entity.user_ticket_index_entity import UserTicketIndex
from src.service.ticket_ledger.driven_adapter.state.staged_write import (
    StagedIdAllocator,
    StagedTable,
    StagedValue,
)


class EventRepoImpl(IEventRepo):
    def __init__(self, *, table: StagedTable[int, Event], ids: StagedIdAllocator) -> None:
        self.table = table
        self.ids = ids

    async def get_by_id(self, *, event_id: int) -> Optional[Event]:
        return self.table.get(event_id)

    async def allocate_id(self) -> int:
        return self.ids.allocate()

    async def last_id(self) -> int:
        return self.ids.last_id()

    async def save(self, *, event: Event) -> Event:
        self.table.put(event.id, event)
        return event


class TicketRepoImpl(ITicketRepo):
    def __init__(self, *, table: StagedTable[int, Ticket], ids: StagedIdAllocator) -> None:
        self.table = table
        self.ids = ids

    async def get_by_id(self, *, ticket_id: int) -> Optional[Ticket]:
        return self.table.get(ticket_id)

    async def allocate_id(self) -> int:
        return self.ids.allocate()

    async def last_id(self) -> int:
        return self.ids.last_id()

    async def save(self, *, ticket: Ticket) -> Ticket:
        self.table.put(ticket.id, ticket)
        return ticket


class OrganizerAccountRepoImpl(IOrganizerAccountRepo):
    def __init__(self, *, table: StagedTable[str, OrganizerAccount]) -> None:
        self.table = table

    async def get(self, *, organizer: str) -> Optional[OrganizerAccount]:
        return self.table.get(organizer)

    async def save(self, *, account: OrganizerAccount) -> OrganizerAccount:
        self.table.put(account.organizer, account)
        return account


class UserTicketIndexRepoImpl(IUserTicketIndexRepo):
    def __init__(self, *, table: StagedTable[str, UserTicketIndex]) -> None:
        self.table = table

    async def get(self, *, owner: str) -> Optional[UserTicketIndex]:
        return self.table.get(owner)

    async def save(self, *, index: UserTicketIndex) -> UserTicketIndex:
        self.table.put(index.owner, index)
        return index


class PlatformConfigRepoImpl(IPlatformConfigRepo):
    def __init__(self, *, value: StagedValue[PlatformConfig]) -> None:
        self.value = value

    async def get(self) -> PlatformConfig:
        return self.value.get()

    async def save(self, *, config: PlatformConfig) -> PlatformConfig:
        self.value.put(config)
        return config
