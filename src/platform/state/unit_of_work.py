"""
Unit of Work Pattern - one transaction boundary across every ledger store

Architecture:
- UoW owns the transaction lifecycle (begin / commit / rollback)
- Repositories obtained from the UoW share its staged writes
- Use cases coordinate several repositories through one UoW, so an operation
  updates all stores together or none of them
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from src.service.ticket_ledger.app.interface.i_event_repo import IEventRepo
    from src.service.ticket_ledger.app.interface.i_organizer_account_repo import (
        IOrganizerAccountRepo,
    )
    from src.service.ticket_ledger.app.interface.i_platform_config_repo import (
        IPlatformConfigRepo,
    )
    from src.service.ticket_ledger.app.interface.i_ticket_repo import ITicketRepo
    from src.service.ticket_ledger.app.interface.i_user_ticket_index_repo import (
        IUserTicketIndexRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Ticket Ledger

    Usage:
        async with uow:
            event = await uow.events.get_by_id(event_id=1)
            ...
            await uow.commit()

    Leaving the block without commit() discards every staged write.
    """

    events: IEventRepo
    tickets: ITicketRepo
    organizer_accounts: IOrganizerAccountRepo
    user_ticket_indexes: IUserTicketIndexRepo
    platform_config: IPlatformConfigRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError
