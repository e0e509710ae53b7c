from typing import Callable, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.entity.user_ticket_index_entity import UserTicketIndex


class GetUserTicketsUseCase:
    """Buyer ticket index lookup; refunded tickets remain listed."""

    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(self, *, owner: str) -> Optional[UserTicketIndex]:
        async with self.uow_factory() as uow:
            return await uow.user_ticket_indexes.get(owner=owner)
