from typing import Callable

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.app.interface.i_block_height_clock import IBlockHeightClock
from src.service.ticket_ledger.app.interface.i_payment_rail import IPaymentRail
from src.service.ticket_ledger.domain.exception.ledger_error import (
    NotAuthorizedError,
    NotFoundError,
    RefundWindowClosedError,
)
from src.service.ticket_ledger.domain.validator.input_validator import (
    require_identity,
    require_uint,
)


class RefundTicketUseCase:
    """
    Self-service refund of an unused ticket by its owner

    Checks, in order: ticket exists, caller owns it, ticket is neither used nor
    refunded, and (current height - purchase height) <= event.refund_window.

    The purchase price is paid back from escrow; event revenue drops by that amount
    while tickets_sold and the organizer's gross revenue stay unchanged.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        clock: IBlockHeightClock,
        payment_rail: IPaymentRail,
        escrow_account: str,
    ) -> None:
        self.uow_factory = uow_factory
        self.clock = clock
        self.payment_rail = payment_rail
        self.escrow_account = escrow_account
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, caller: str, ticket_id: int) -> bool:
        require_identity(field='caller', value=caller)
        require_uint(ticket_id=ticket_id)

        with self.tracer.start_as_current_span(
            'use_case.refund_ticket', attributes={'ticket.id': ticket_id}
        ):
            async with self.uow_factory() as uow:
                ticket = await uow.tickets.get_by_id(ticket_id=ticket_id)
                if ticket is None:
                    raise NotFoundError(f'Ticket {ticket_id} not found')

                if not ticket.is_owned_by(caller):
                    raise NotAuthorizedError(f'Only the owner can refund ticket {ticket_id}')

                ticket.ensure_not_terminal()

                event = await uow.events.get_by_id(event_id=ticket.event_id)
                if event is None:
                    raise NotFoundError(f'Event {ticket.event_id} not found')

                current_height = self.clock.current_height()
                if not event.is_refund_window_open(
                    purchase_height=ticket.purchase_height, current_height=current_height
                ):
                    raise RefundWindowClosedError(
                        f'Refund window of {event.refund_window} closed for ticket {ticket_id} '
                        f'(purchased at {ticket.purchase_height}, now {current_height})'
                    )

                refunded_ticket = ticket.mark_as_refunded()

                await self.payment_rail.transfer(
                    sender=self.escrow_account,
                    recipient=ticket.owner,
                    amount=ticket.purchase_price,
                )

                await uow.tickets.save(ticket=refunded_ticket)
                await uow.events.save(event=event.record_refund(amount=ticket.purchase_price))
                await uow.commit()

        Logger.base.info(
            f'↩️ [REFUND] Ticket {ticket_id} refunded {ticket.purchase_price} to {caller}'
        )
        return True
