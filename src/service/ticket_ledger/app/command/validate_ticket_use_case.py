from typing import Callable

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticket_ledger.domain.exception.ledger_error import (
    NotAuthorizedError,
    NotFoundError,
)
from src.service.ticket_ledger.domain.validator.input_validator import (
    require_identity,
    require_uint,
)


class ValidateTicketUseCase:
    """Redeem a ticket at the gate; only the organizer of the ticket's event may do so."""

    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, caller: str, ticket_id: int) -> bool:
        require_identity(field='caller', value=caller)
        require_uint(ticket_id=ticket_id)

        with self.tracer.start_as_current_span(
            'use_case.validate_ticket', attributes={'ticket.id': ticket_id}
        ):
            async with self.uow_factory() as uow:
                ticket = await uow.tickets.get_by_id(ticket_id=ticket_id)
                if ticket is None:
                    raise NotFoundError(f'Ticket {ticket_id} not found')

                event = await uow.events.get_by_id(event_id=ticket.event_id)
                if event is None:
                    raise NotFoundError(f'Event {ticket.event_id} not found')

                if not event.is_organized_by(caller):
                    raise NotAuthorizedError(
                        f'Only the organizer of event {event.id} can validate ticket {ticket_id}'
                    )

                await uow.tickets.save(ticket=ticket.mark_as_used())
                await uow.commit()

        Logger.base.info(f'✅ [VALIDATE] Ticket {ticket_id} redeemed for event {event.id}')
        return True
