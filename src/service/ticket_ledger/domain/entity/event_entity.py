"""
Event entity

[Business Invariants]
- 0 <= tickets_sold <= total_tickets
- revenue == ticket_price x (tickets sold - tickets refunded)
- is_active is set at creation and never flips
"""

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticket_ledger.domain.exception.ledger_error import (
    EventExpiredError,
    InvalidPriceError,
    SoldOutError,
)


@attrs.define(frozen=True)
class Event:
    id: int
    name: str
    description: str
    venue: str
    category: str
    organizer: str
    event_height: int
    total_tickets: int
    ticket_price: int
    refund_window: int
    tickets_sold: int = 0
    revenue: int = 0
    is_active: bool = True

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        event_id: int,
        name: str,
        description: str,
        venue: str,
        category: str,
        organizer: str,
        event_height: int,
        total_tickets: int,
        ticket_price: int,
        refund_window: int,
        current_height: int,
        max_refund_window: int,
    ) -> 'Event':
        """
        Create a new event with no sales.

        The ticket price floor is a platform rule and is checked by PlatformConfig
        before this factory runs.

        Raises:
            InvalidPriceError: refund_window above max_refund_window (shares the price code)
            EventExpiredError: event_height not strictly in the future
        """
        if refund_window > max_refund_window:
            raise InvalidPriceError(
                f'Refund window {refund_window} exceeds maximum {max_refund_window}'
            )
        if event_height <= current_height:
            raise EventExpiredError(
                f'Event height {event_height} must be after current height {current_height}'
            )

        return cls(
            id=event_id,
            name=name,
            description=description,
            venue=venue,
            category=category,
            organizer=organizer,
            event_height=event_height,
            total_tickets=total_tickets,
            ticket_price=ticket_price,
            refund_window=refund_window,
            tickets_sold=0,
            revenue=0,
            is_active=True,
        )

    @property
    def remaining_tickets(self) -> int:
        return self.total_tickets - self.tickets_sold

    @property
    def is_sold_out(self) -> bool:
        return self.tickets_sold >= self.total_tickets

    def is_organized_by(self, identity: str) -> bool:
        return self.organizer == identity

    def has_occurred(self, *, current_height: int) -> bool:
        return current_height >= self.event_height

    def is_refund_window_open(self, *, purchase_height: int, current_height: int) -> bool:
        return current_height - purchase_height <= self.refund_window

    @Logger.io
    def record_sale(self) -> 'Event':
        if self.is_sold_out:
            raise SoldOutError(f'Event {self.id} is sold out')
        return attrs.evolve(
            self,
            tickets_sold=self.tickets_sold + 1,
            revenue=self.revenue + self.ticket_price,
        )

    @Logger.io
    def record_refund(self, *, amount: int) -> 'Event':
        # Refunded seats stay counted in tickets_sold; capacity is not reclaimed
        return attrs.evolve(self, revenue=self.revenue - amount)
