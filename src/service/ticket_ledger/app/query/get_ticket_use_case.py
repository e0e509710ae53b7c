from typing import Callable, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.entity.ticket_entity import Ticket


class GetTicketUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(self, *, ticket_id: int) -> Optional[Ticket]:
        async with self.uow_factory() as uow:
            return await uow.tickets.get_by_id(ticket_id=ticket_id)
