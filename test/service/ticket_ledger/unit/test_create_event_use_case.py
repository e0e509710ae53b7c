"""
Unit tests for create-event

Checks, first failure wins: price floor, refund window ceiling, event height.
"""

from typing import Callable

import pytest

from src.service.ticket_ledger.domain.enum.ledger_error_code import LedgerErrorCode
from src.service.ticket_ledger.domain.enum.ledger_operation import LedgerOperation
from src.service.ticket_ledger.driving_adapter.block_sequencer import BlockSequencer, Tx


@pytest.mark.unit
class TestCreateEvent:
    @pytest.mark.asyncio
    async def test_create_event_success(
        self,
        sequencer: BlockSequencer,
        create_event_tx: Callable[..., Tx],
        identities: dict[str, str],
    ) -> None:
        block = await sequencer.mine_block([create_event_tx()])

        assert block.receipts[0].result.is_ok
        assert block.receipts[0].result.value is True

        event = await sequencer.call_read_only(LedgerOperation.GET_EVENT, event_id=1)
        assert event.name == 'Summer Festival'
        assert event.organizer == identities['organizer']
        assert event.total_tickets == 5
        assert event.tickets_sold == 0
        assert event.revenue == 0
        assert event.is_active

        account = await sequencer.call_read_only(
            LedgerOperation.GET_ORGANIZER_REVENUE, organizer=identities['organizer']
        )
        assert account.events_organized == 1
        assert account.total_revenue == 0
        assert account.pending_withdrawals == 0

    @pytest.mark.asyncio
    async def test_event_ids_are_sequential(
        self, sequencer: BlockSequencer, create_event_tx: Callable[..., Tx]
    ) -> None:
        await sequencer.mine_block([create_event_tx(), create_event_tx(name='Second')])

        assert await sequencer.call_read_only(LedgerOperation.GET_EVENT_COUNT) == 2
        second = await sequencer.call_read_only(LedgerOperation.GET_EVENT, event_id=2)
        assert second.name == 'Second'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ('overrides', 'expected_code'),
        [
            ({'ticket_price': 100}, LedgerErrorCode.INVALID_PRICE),
            ({'refund_window': 2_000_000}, LedgerErrorCode.INVALID_PRICE),
            ({'event_height': 1}, LedgerErrorCode.EVENT_EXPIRED),
            ({'ticket_price': 100, 'event_height': 1}, LedgerErrorCode.INVALID_PRICE),
            ({'name': 'x' * 101}, LedgerErrorCode.INVALID_PARAMETER),
            ({'total_tickets': -1}, LedgerErrorCode.INVALID_PARAMETER),
            ({'caller': ''}, LedgerErrorCode.INVALID_PARAMETER),
        ],
    )
    async def test_create_event_rejections(
        self,
        sequencer: BlockSequencer,
        create_event_tx: Callable[..., Tx],
        overrides: dict,
        expected_code: LedgerErrorCode,
    ) -> None:
        block = await sequencer.mine_block([create_event_tx(**overrides)])

        result = block.receipts[0].result
        assert result.is_err
        assert result.error_code is expected_code
        assert await sequencer.call_read_only(LedgerOperation.GET_EVENT, event_id=1) is None
        assert await sequencer.call_read_only(LedgerOperation.GET_EVENT_COUNT) == 0

    @pytest.mark.asyncio
    async def test_refund_window_1008_is_accepted(
        self, sequencer: BlockSequencer, create_event_tx: Callable[..., Tx]
    ) -> None:
        block = await sequencer.mine_block([create_event_tx(refund_window=1008)])

        assert block.receipts[0].result.is_ok

    @pytest.mark.asyncio
    async def test_rejected_create_does_not_consume_id(
        self, sequencer: BlockSequencer, create_event_tx: Callable[..., Tx]
    ) -> None:
        await sequencer.mine_block([create_event_tx(event_height=1), create_event_tx()])

        assert await sequencer.call_read_only(LedgerOperation.GET_EVENT_COUNT) == 1
        assert await sequencer.call_read_only(LedgerOperation.GET_EVENT, event_id=1) is not None

    @pytest.mark.asyncio
    async def test_zero_capacity_event_sells_nothing(
        self,
        sequencer: BlockSequencer,
        create_event_tx: Callable[..., Tx],
        purchase_tx: Callable[..., Tx],
        identities: dict[str, str],
    ) -> None:
        block = await sequencer.mine_block(
            [create_event_tx(total_tickets=0), purchase_tx(caller=identities['buyer'])]
        )

        assert block.receipts[0].result.is_ok
        assert block.receipts[1].result.error_code is LedgerErrorCode.SOLD_OUT
