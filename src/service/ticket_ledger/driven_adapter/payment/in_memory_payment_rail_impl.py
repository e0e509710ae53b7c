"""
In-memory Payment Rail

Balances per identity with an append-only transfer history. Each transfer is
checked fully before any balance moves, so it either completes or leaves every
balance untouched.
"""

from collections import defaultdict
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticket_ledger.app.dto.transfer_record import TransferRecord
from src.service.ticket_ledger.app.interface.i_block_height_clock import IBlockHeightClock
from src.service.ticket_ledger.app.interface.i_payment_rail import IPaymentRail
from src.service.ticket_ledger.domain.exception.ledger_error import (
    InvalidParameterError,
    TransferFailedError,
)


class InMemoryPaymentRailImpl(IPaymentRail):
    def __init__(
        self, *, clock: IBlockHeightClock, initial_balances: Optional[dict[str, int]] = None
    ) -> None:
        self.clock = clock
        self._balances: defaultdict[str, int] = defaultdict(int, initial_balances or {})
        self.history: list[TransferRecord] = []

    def balance_of(self, identity: str) -> int:
        return self._balances.get(identity, 0)

    @Logger.io
    def fund(self, *, identity: str, amount: int) -> int:
        if amount < 0:
            raise InvalidParameterError('Funding amount must be non-negative')
        self._balances[identity] += amount
        return self._balances[identity]

    @Logger.io
    async def transfer(self, *, sender: str, recipient: str, amount: int) -> TransferRecord:
        if amount < 0:
            raise TransferFailedError(f'Negative transfer amount {amount}')
        if sender == recipient:
            raise TransferFailedError(f'Sender and recipient are both {sender}')

        record = TransferRecord(
            sender=sender, recipient=recipient, amount=amount, height=self.clock.current_height()
        )
        if amount == 0:
            return record

        if self.balance_of(sender) < amount:
            raise TransferFailedError(
                f'Insufficient funds: {sender} holds {self.balance_of(sender)}, needs {amount}'
            )

        self._balances[sender] -= amount
        self._balances[recipient] += amount
        self.history.append(record)

        Logger.base.debug(f'💸 [TRANSFER] {amount} {sender} → {recipient}')
        return record
