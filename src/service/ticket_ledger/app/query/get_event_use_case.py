from typing import Callable, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.entity.event_entity import Event


class GetEventUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(self, *, event_id: int) -> Optional[Event]:
        async with self.uow_factory() as uow:
            event = await uow.events.get_by_id(event_id=event_id)

        if event is None:
            Logger.base.warning(f'⚠️ [GET_EVENT] Event {event_id} not found')
        return event
