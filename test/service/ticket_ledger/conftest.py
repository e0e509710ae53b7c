from typing import Any, Callable

import pytest

from src.service.ticket_ledger.domain.enum.ledger_operation import LedgerOperation
from src.service.ticket_ledger.driving_adapter.block_sequencer import Tx


DEFAULT_TICKET_PRICE = 2_000_000


@pytest.fixture
def create_event_tx(identities: dict[str, str]) -> Callable[..., Tx]:
    """Build a create-event transaction; keyword overrides replace the defaults"""

    def _build(**overrides: Any) -> Tx:
        params: dict[str, Any] = {
            'name': 'Summer Festival',
            'description': 'Three stages by the river',
            'venue': 'Riverside Park',
            'event_height': 1000,
            'total_tickets': 5,
            'ticket_price': DEFAULT_TICKET_PRICE,
            'refund_window': 144,
            'category': 'music',
        }
        caller = overrides.pop('caller', identities['organizer'])
        params |= overrides
        return Tx.call(LedgerOperation.CREATE_EVENT, caller=caller, **params)

    return _build


@pytest.fixture
def purchase_tx() -> Callable[..., Tx]:
    def _build(*, caller: str, event_id: int = 1) -> Tx:
        return Tx.call(LedgerOperation.PURCHASE_TICKET, caller=caller, event_id=event_id)

    return _build
