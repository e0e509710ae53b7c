from typing import Callable, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.entity.organizer_account_entity import OrganizerAccount


class GetOrganizerRevenueUseCase:
    """Organizer account lookup; absent until the identity creates its first event."""

    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(self, *, organizer: str) -> Optional[OrganizerAccount]:
        async with self.uow_factory() as uow:
            return await uow.organizer_accounts.get(organizer=organizer)
