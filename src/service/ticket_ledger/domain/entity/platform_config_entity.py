"""
Platform Configuration - process-wide singleton

The owner is fixed at initialization; fee and minimum price change only
through owner-gated operations.
"""

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticket_ledger.domain.exception.ledger_error import (
    InvalidPriceError,
    NotAuthorizedError,
)


MAX_PLATFORM_FEE_PERCENT = 100


@attrs.define(frozen=True)
class PlatformConfig:
    owner: str
    platform_fee_percent: int
    min_ticket_price: int

    @Logger.io
    def ensure_owner(self, *, caller: str) -> None:
        if caller != self.owner:
            raise NotAuthorizedError(f'{caller} is not the platform owner')

    @Logger.io
    def ensure_ticket_price_allowed(self, *, ticket_price: int) -> None:
        if ticket_price < self.min_ticket_price:
            raise InvalidPriceError(
                f'Ticket price {ticket_price} is below minimum {self.min_ticket_price}'
            )

    @Logger.io
    def with_platform_fee(self, *, new_fee: int) -> 'PlatformConfig':
        if new_fee > MAX_PLATFORM_FEE_PERCENT:
            raise InvalidPriceError(f'Platform fee {new_fee}% exceeds {MAX_PLATFORM_FEE_PERCENT}%')
        return attrs.evolve(self, platform_fee_percent=new_fee)

    @Logger.io
    def with_min_ticket_price(self, *, new_min: int) -> 'PlatformConfig':
        return attrs.evolve(self, min_ticket_price=new_min)

    def calculate_platform_fee(self, *, amount: int) -> int:
        # Integer division on non-negative operands: floor == truncation toward zero
        return amount * self.platform_fee_percent // 100
