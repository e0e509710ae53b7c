"""
In-memory Unit of Work

One transaction = hold the ledger lock, stage every write, then publish all
staged writes in a single synchronous commit. Nothing reaches the committed
state unless every precondition (and the payment transfer) has succeeded.
"""

from __future__ import annotations

from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.entity.platform_config_entity import PlatformConfig
from src.service.ticket_ledger.driven_adapter.state.in_memory_ledger_repo_impl import (
    EventRepoImpl,
    OrganizerAccountRepoImpl,
    PlatformConfigRepoImpl,
    TicketRepoImpl,
    UserTicketIndexRepoImpl,
)
from src.service.ticket_ledger.driven_adapter.state.in_memory_ledger_state import (
    InMemoryLedgerState,
)
from src.service.ticket_ledger.driven_adapter.state.staged_write import (
    StagedIdAllocator,
    StagedTable,
    StagedValue,
)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self, *, state: InMemoryLedgerState) -> None:
        self.state = state
        self._staged: list[StagedTable | StagedValue | StagedIdAllocator] = []

    async def __aenter__(self) -> InMemoryUnitOfWork:
        await self.state.lock.acquire()

        event_table = StagedTable(self.state.events)
        ticket_table = StagedTable(self.state.tickets)
        organizer_table = StagedTable(self.state.organizer_accounts)
        index_table = StagedTable(self.state.user_ticket_indexes)
        config_value = StagedValue(load=self._load_config, store=self._store_config)
        event_ids = StagedIdAllocator(self.state.event_ids)
        ticket_ids = StagedIdAllocator(self.state.ticket_ids)
        self._staged = [
            event_table,
            ticket_table,
            organizer_table,
            index_table,
            config_value,
            event_ids,
            ticket_ids,
        ]

        self.events = EventRepoImpl(table=event_table, ids=event_ids)
        self.tickets = TicketRepoImpl(table=ticket_table, ids=ticket_ids)
        self.organizer_accounts = OrganizerAccountRepoImpl(table=organizer_table)
        self.user_ticket_indexes = UserTicketIndexRepoImpl(table=index_table)
        self.platform_config = PlatformConfigRepoImpl(value=config_value)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            self._staged = []
            self.state.lock.release()

    async def _commit(self) -> None:
        for staged in self._staged:
            staged.flush()

    async def rollback(self) -> None:
        for staged in self._staged:
            staged.discard()

    def _load_config(self) -> PlatformConfig:
        return self.state.platform_config

    def _store_config(self, config: PlatformConfig) -> None:
        self.state.platform_config = config
