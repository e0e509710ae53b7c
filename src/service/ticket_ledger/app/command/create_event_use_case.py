from typing import Callable

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.app.interface.i_block_height_clock import IBlockHeightClock
from src.service.ticket_ledger.domain.entity.event_entity import Event
from src.service.ticket_ledger.domain.entity.organizer_account_entity import OrganizerAccount
from src.service.ticket_ledger.domain.validator.input_validator import (
    require_bounded_text,
    require_identity,
    require_uint,
)


class CreateEventUseCase:
    """
    Register a new event for the calling organizer

    Checks, first failure wins:
    1. ticket_price >= platform minimum           -> InvalidPrice
    2. refund_window <= MAX_REFUND_WINDOW          -> InvalidPrice
    3. event_height > current height               -> EventExpired

    On success the event and the organizer's account are written in one transaction.
    Zero-capacity events are accepted and are sold out from creation.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        clock: IBlockHeightClock,
        max_refund_window: int,
        text_bounds: dict[str, int],
    ) -> None:
        self.uow_factory = uow_factory
        self.clock = clock
        self.max_refund_window = max_refund_window
        self.text_bounds = text_bounds
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(
        self,
        *,
        caller: str,
        name: str,
        description: str,
        venue: str,
        event_height: int,
        total_tickets: int,
        ticket_price: int,
        refund_window: int,
        category: str,
    ) -> bool:
        require_identity(field='caller', value=caller)
        for field, value in (
            ('name', name),
            ('description', description),
            ('venue', venue),
            ('category', category),
        ):
            require_bounded_text(field=field, value=value, max_length=self.text_bounds[field])
        require_uint(
            event_height=event_height,
            total_tickets=total_tickets,
            ticket_price=ticket_price,
            refund_window=refund_window,
        )

        with self.tracer.start_as_current_span(
            'use_case.create_event', attributes={'event.organizer': caller}
        ):
            async with self.uow_factory() as uow:
                config = await uow.platform_config.get()
                config.ensure_ticket_price_allowed(ticket_price=ticket_price)

                event = Event.create(
                    event_id=await uow.events.allocate_id(),
                    name=name,
                    description=description,
                    venue=venue,
                    category=category,
                    organizer=caller,
                    event_height=event_height,
                    total_tickets=total_tickets,
                    ticket_price=ticket_price,
                    refund_window=refund_window,
                    current_height=self.clock.current_height(),
                    max_refund_window=self.max_refund_window,
                )
                await uow.events.save(event=event)

                account = await uow.organizer_accounts.get(
                    organizer=caller
                ) or OrganizerAccount.open(organizer=caller)
                await uow.organizer_accounts.save(account=account.record_event_created())

                await uow.commit()

        Logger.base.info(
            f'🎫 [CREATE_EVENT] Event {event.id} "{name}" by {caller}: '
            f'{total_tickets} tickets @ {ticket_price}, refund window {refund_window}'
        )
        return True
