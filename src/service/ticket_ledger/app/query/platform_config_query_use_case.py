"""
Platform configuration read queries

- calculate_platform_fee: floor(amount x fee_percent / 100), integer arithmetic only
- get_platform_config: current owner / fee / minimum price
- get_event_count / get_ticket_count: last allocated sequential ids
"""

from typing import Callable

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.entity.platform_config_entity import PlatformConfig
from src.service.ticket_ledger.domain.validator.input_validator import require_uint


class PlatformConfigQueryUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def calculate_platform_fee(self, *, amount: int) -> int:
        require_uint(amount=amount)
        async with self.uow_factory() as uow:
            config = await uow.platform_config.get()
        return config.calculate_platform_fee(amount=amount)

    @Logger.io
    async def get_platform_config(self) -> PlatformConfig:
        async with self.uow_factory() as uow:
            return await uow.platform_config.get()

    @Logger.io
    async def get_event_count(self) -> int:
        async with self.uow_factory() as uow:
            return await uow.events.last_id()

    @Logger.io
    async def get_ticket_count(self) -> int:
        async with self.uow_factory() as uow:
            return await uow.tickets.last_id()
