from typing import Callable

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.validator.input_validator import (
    require_identity,
    require_uint,
)


class UpdateMinTicketPriceUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, caller: str, new_min: int) -> bool:
        require_identity(field='caller', value=caller)
        require_uint(new_min=new_min)

        with self.tracer.start_as_current_span('use_case.update_min_ticket_price'):
            async with self.uow_factory() as uow:
                config = await uow.platform_config.get()
                config.ensure_owner(caller=caller)
                await uow.platform_config.save(config=config.with_min_ticket_price(new_min=new_min))
                await uow.commit()

        Logger.base.info(f'⚙️ [CONFIG] Minimum ticket price set to {new_min}')
        return True
