"""
In-memory Ledger State

Committed contents of every store plus the sequential id allocators and the
single lock that serializes transactions. Only InMemoryUnitOfWork writes here,
and only inside commit().
"""

import asyncio

import attrs

from src.service.ticket_ledger.domain.entity.event_entity import Event
from src.service.ticket_ledger.domain.entity.organizer_account_entity import OrganizerAccount
from src.service.ticket_ledger.domain.entity.platform_config_entity import PlatformConfig
from src.service.ticket_ledger.domain.entity.ticket_entity import Ticket
from src.service.ticket_ledger.domain.entity.user_ticket_index_entity import UserTicketIndex


@attrs.define
class SequentialIdAllocator:
    """Monotonic id counter; ids start at 1 and are never reused once committed."""

    last_id: int = 0


class InMemoryLedgerState:
    def __init__(self, *, platform_config: PlatformConfig) -> None:
        self.events: dict[int, Event] = {}
        self.tickets: dict[int, Ticket] = {}
        self.organizer_accounts: dict[str, OrganizerAccount] = {}
        self.user_ticket_indexes: dict[str, UserTicketIndex] = {}
        self.platform_config = platform_config

        self.event_ids = SequentialIdAllocator()
        self.ticket_ids = SequentialIdAllocator()

        self.lock = asyncio.Lock()

    @classmethod
    def initialize(
        cls, *, owner: str, platform_fee_percent: int, min_ticket_price: int
    ) -> 'InMemoryLedgerState':
        return cls(
            platform_config=PlatformConfig(
                owner=owner,
                platform_fee_percent=platform_fee_percent,
                min_ticket_price=min_ticket_price,
            )
        )
