from typing import Callable

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.app.interface.i_block_height_clock import IBlockHeightClock
from src.service.ticket_ledger.app.interface.i_payment_rail import IPaymentRail
from src.service.ticket_ledger.domain.entity.organizer_account_entity import OrganizerAccount
from src.service.ticket_ledger.domain.entity.ticket_entity import Ticket
from src.service.ticket_ledger.domain.entity.user_ticket_index_entity import UserTicketIndex
from src.service.ticket_ledger.domain.exception.ledger_error import (
    EventExpiredError,
    NotFoundError,
)
from src.service.ticket_ledger.domain.validator.input_validator import (
    require_identity,
    require_uint,
)


class PurchaseTicketUseCase:
    """
    Buy one ticket for an event

    Flow:
    1. Validate event exists and still has capacity (Fail Fast)
    2. Transfer ticket_price from buyer to the platform escrow
    3. Issue ticket, bump event sales/revenue, credit organizer revenue,
       append to the buyer's ticket index, all in one commit

    A failed transfer aborts before any ledger write.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        clock: IBlockHeightClock,
        payment_rail: IPaymentRail,
        escrow_account: str,
        restrict_purchase_after_event: bool = False,
    ) -> None:
        self.uow_factory = uow_factory
        self.clock = clock
        self.payment_rail = payment_rail
        self.escrow_account = escrow_account
        self.restrict_purchase_after_event = restrict_purchase_after_event
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, caller: str, event_id: int) -> bool:
        require_identity(field='caller', value=caller)
        require_uint(event_id=event_id)

        with self.tracer.start_as_current_span(
            'use_case.purchase_ticket', attributes={'event.id': event_id, 'buyer': caller}
        ):
            async with self.uow_factory() as uow:
                event = await uow.events.get_by_id(event_id=event_id)
                if event is None:
                    raise NotFoundError(f'Event {event_id} not found')

                current_height = self.clock.current_height()
                if self.restrict_purchase_after_event and event.has_occurred(
                    current_height=current_height
                ):
                    raise EventExpiredError(f'Event {event_id} took place at {event.event_height}')

                sold_event = event.record_sale()

                await self.payment_rail.transfer(
                    sender=caller, recipient=self.escrow_account, amount=event.ticket_price
                )

                ticket = Ticket.issue(
                    ticket_id=await uow.tickets.allocate_id(),
                    event_id=event.id,
                    owner=caller,
                    purchase_price=event.ticket_price,
                    purchase_height=current_height,
                )
                await uow.tickets.save(ticket=ticket)
                await uow.events.save(event=sold_event)

                account = await uow.organizer_accounts.get(
                    organizer=event.organizer
                ) or OrganizerAccount.open(organizer=event.organizer)
                await uow.organizer_accounts.save(
                    account=account.record_revenue(amount=event.ticket_price)
                )

                index = await uow.user_ticket_indexes.get(owner=caller) or UserTicketIndex.open(
                    owner=caller
                )
                await uow.user_ticket_indexes.save(index=index.append(ticket_id=ticket.id))

                await uow.commit()

        Logger.base.info(
            f'💳 [PURCHASE] Ticket {ticket.id} for event {event_id} sold to {caller} '
            f'({sold_event.tickets_sold}/{sold_event.total_tickets})'
        )
        return True
