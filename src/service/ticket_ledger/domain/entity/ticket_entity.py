import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticket_ledger.domain.exception.ledger_error import TicketUsedError


@attrs.define(frozen=True)
class Ticket:
    id: int
    event_id: int
    owner: str
    purchase_price: int
    purchase_height: int
    is_used: bool = False
    is_refunded: bool = False

    @classmethod
    @Logger.io
    def issue(
        cls,
        *,
        ticket_id: int,
        event_id: int,
        owner: str,
        purchase_price: int,
        purchase_height: int,
    ) -> 'Ticket':
        return cls(
            id=ticket_id,
            event_id=event_id,
            owner=owner,
            purchase_price=purchase_price,
            purchase_height=purchase_height,
        )

    @property
    def is_terminal(self) -> bool:
        return self.is_used or self.is_refunded

    def is_owned_by(self, identity: str) -> bool:
        return self.owner == identity

    @Logger.io
    def ensure_not_terminal(self) -> None:
        """
        Used and refunded tickets report the same error code.

        Raises:
            TicketUsedError: ticket already validated or refunded
        """
        if self.is_used:
            raise TicketUsedError(f'Ticket {self.id} has already been used')
        if self.is_refunded:
            raise TicketUsedError(f'Ticket {self.id} has already been refunded')

    @Logger.io
    def mark_as_used(self) -> 'Ticket':
        self.ensure_not_terminal()
        return attrs.evolve(self, is_used=True)

    @Logger.io
    def mark_as_refunded(self) -> 'Ticket':
        self.ensure_not_terminal()
        return attrs.evolve(self, is_refunded=True)
