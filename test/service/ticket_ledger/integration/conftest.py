"""
BDD step definitions for the ticket ledger

Every When step mines one block through the BlockSequencer; the receipts of the
last mined block are kept in the shared context for Then steps.
"""

import asyncio
from collections.abc import Coroutine, Generator
from typing import Any, Callable

import pytest
from pytest_bdd import given, parsers, then, when

from src.platform.config.di import Container
from src.service.ticket_ledger.app.dto.operation_result import OperationResult
from src.service.ticket_ledger.domain.enum.ledger_error_code import LedgerErrorCode
from src.service.ticket_ledger.domain.enum.ledger_operation import LedgerOperation
from src.service.ticket_ledger.driving_adapter.block_sequencer import Block, BlockSequencer, Tx


DEFAULT_EVENT_HEIGHT = 100_000


# =============================================================================
# Fixtures
# =============================================================================
@pytest.fixture
def context() -> dict[str, Any]:
    """Shared test context for storing state between steps"""
    return {}


@pytest.fixture
def run() -> Generator[Callable[[Coroutine[Any, Any, Any]], Any], None, None]:
    """Run async coroutine in sync step functions."""
    loop = asyncio.new_event_loop()
    yield loop.run_until_complete
    loop.close()


@pytest.fixture
def ledger(container: Container) -> BlockSequencer:
    return container.block_sequencer()


def _mine(
    run: Callable[[Coroutine[Any, Any, Any]], Any],
    ledger: BlockSequencer,
    context: dict[str, Any],
    *txs: Tx,
) -> Block:
    block = run(ledger.mine_block(txs))
    context['block'] = block
    return block


def _last_result(context: dict[str, Any]) -> OperationResult:
    return context['block'].receipts[-1].result


def _create_event_tx(
    organizer: str, *, total: int, price: int, window: int, height: int = DEFAULT_EVENT_HEIGHT
) -> Tx:
    return Tx.call(
        LedgerOperation.CREATE_EVENT,
        caller=organizer,
        name=f'{organizer} showcase',
        description='General admission',
        venue='Main Hall',
        event_height=height,
        total_tickets=total,
        ticket_price=price,
        refund_window=window,
        category='concert',
    )


# =============================================================================
# Given Steps
# =============================================================================
@given('a freshly deployed ledger')
def fresh_ledger(ledger: BlockSequencer) -> None:
    assert ledger.current_height == 0


@given(parsers.parse('"{identity}" holds {amount:d} micro-units'))
def fund_identity(container: Container, identity: str, amount: int) -> None:
    container.payment_rail().fund(identity=identity, amount=amount)


@given(
    parsers.parse(
        '"{organizer}" has created an event with {total:d} tickets at {price:d} '
        'and a refund window of {window:d}'
    )
)
def event_created(
    run,
    ledger: BlockSequencer,
    context: dict[str, Any],
    organizer: str,
    total: int,
    price: int,
    window: int,
) -> None:
    block = _mine(
        run,
        ledger,
        context,
        _create_event_tx(organizer, total=total, price=price, window=window),
    )
    assert block.receipts[0].result.is_ok


@given(parsers.parse('"{buyer}" has purchased a ticket for event {event_id:d}'))
def ticket_purchased(
    run, ledger: BlockSequencer, context: dict[str, Any], buyer: str, event_id: int
) -> None:
    block = _mine(
        run,
        ledger,
        context,
        Tx.call(LedgerOperation.PURCHASE_TICKET, caller=buyer, event_id=event_id),
    )
    assert block.receipts[0].result.is_ok


# =============================================================================
# When Steps
# =============================================================================
@when(
    parsers.parse(
        '"{organizer}" creates an event with {total:d} tickets at {price:d} '
        'and a refund window of {window:d}'
    )
)
def create_event(
    run,
    ledger: BlockSequencer,
    context: dict[str, Any],
    organizer: str,
    total: int,
    price: int,
    window: int,
) -> None:
    _mine(
        run,
        ledger,
        context,
        _create_event_tx(organizer, total=total, price=price, window=window),
    )


@when(
    parsers.parse(
        '"{organizer}" creates an event at height {height:d} with {total:d} tickets at {price:d}'
    )
)
def create_event_at_height(
    run,
    ledger: BlockSequencer,
    context: dict[str, Any],
    organizer: str,
    height: int,
    total: int,
    price: int,
) -> None:
    _mine(
        run,
        ledger,
        context,
        _create_event_tx(organizer, total=total, price=price, window=144, height=height),
    )


@when(parsers.parse('"{buyer}" purchases a ticket for event {event_id:d}'))
def purchase_ticket(
    run, ledger: BlockSequencer, context: dict[str, Any], buyer: str, event_id: int
) -> None:
    _mine(
        run,
        ledger,
        context,
        Tx.call(LedgerOperation.PURCHASE_TICKET, caller=buyer, event_id=event_id),
    )


@when(parsers.parse('buyers "{buyers}" each purchase a ticket for event {event_id:d} in one block'))
def purchase_tickets_in_one_block(
    run, ledger: BlockSequencer, context: dict[str, Any], buyers: str, event_id: int
) -> None:
    _mine(
        run,
        ledger,
        context,
        *(
            Tx.call(LedgerOperation.PURCHASE_TICKET, caller=buyer.strip(), event_id=event_id)
            for buyer in buyers.split(',')
        ),
    )


@when(parsers.parse('"{caller}" validates ticket {ticket_id:d}'))
def validate_ticket(
    run, ledger: BlockSequencer, context: dict[str, Any], caller: str, ticket_id: int
) -> None:
    _mine(
        run,
        ledger,
        context,
        Tx.call(LedgerOperation.VALIDATE_TICKET, caller=caller, ticket_id=ticket_id),
    )


@when(parsers.parse('"{caller}" refunds ticket {ticket_id:d}'))
def refund_ticket(
    run, ledger: BlockSequencer, context: dict[str, Any], caller: str, ticket_id: int
) -> None:
    _mine(
        run,
        ledger,
        context,
        Tx.call(LedgerOperation.REFUND_TICKET, caller=caller, ticket_id=ticket_id),
    )


@when(parsers.parse('{count:d} empty blocks are mined'))
def mine_empty_blocks(ledger: BlockSequencer, count: int) -> None:
    ledger.mine_empty_blocks(count)


@when(parsers.parse('"{caller}" sets the platform fee to {fee:d}'))
def set_platform_fee(
    run, ledger: BlockSequencer, context: dict[str, Any], caller: str, fee: int
) -> None:
    _mine(
        run,
        ledger,
        context,
        Tx.call(LedgerOperation.UPDATE_PLATFORM_FEE, caller=caller, new_fee=fee),
    )


@when(parsers.parse('"{caller}" sets the minimum ticket price to {price:d}'))
def set_min_ticket_price(
    run, ledger: BlockSequencer, context: dict[str, Any], caller: str, price: int
) -> None:
    _mine(
        run,
        ledger,
        context,
        Tx.call(LedgerOperation.UPDATE_MIN_TICKET_PRICE, caller=caller, new_min=price),
    )


# =============================================================================
# Then Steps
# =============================================================================
@then('the operation succeeds')
def operation_succeeds(context: dict[str, Any]) -> None:
    result = _last_result(context)
    assert result.is_ok, f'expected ok, got {result.error_code!r}: {result.message}'


@then(parsers.parse('the operation fails with code {code:d}'))
def operation_fails(context: dict[str, Any], code: int) -> None:
    result = _last_result(context)
    assert result.is_err
    assert result.error_code is LedgerErrorCode(code)


@then(parsers.parse('receipts {first:d} to {last:d} succeed'))
def receipts_succeed(context: dict[str, Any], first: int, last: int) -> None:
    receipts = context['block'].receipts[first - 1 : last]
    assert all(receipt.result.is_ok for receipt in receipts)


@then(parsers.parse('receipt {index:d} fails with code {code:d}'))
def receipt_fails(context: dict[str, Any], index: int, code: int) -> None:
    result = context['block'].receipts[index - 1].result
    assert result.error_code is LedgerErrorCode(code)


@then(parsers.parse('event {event_id:d} has {sold:d} tickets sold and revenue {revenue:d}'))
def event_totals(run, ledger: BlockSequencer, event_id: int, sold: int, revenue: int) -> None:
    event = run(ledger.call_read_only(LedgerOperation.GET_EVENT, event_id=event_id))
    assert event.tickets_sold == sold
    assert event.revenue == revenue


@then(parsers.parse('ticket {ticket_id:d} is {status}'))
def ticket_status(run, ledger: BlockSequencer, ticket_id: int, status: str) -> None:
    ticket = run(ledger.call_read_only(LedgerOperation.GET_TICKET, ticket_id=ticket_id))
    expected = {
        'used': (True, False),
        'refunded': (False, True),
        'unused': (False, False),
    }[status]
    assert (ticket.is_used, ticket.is_refunded) == expected


@then(parsers.parse('"{identity}" holds {amount:d} micro-units'))
def balance_is(container: Container, identity: str, amount: int) -> None:
    assert container.payment_rail().balance_of(identity) == amount


@then(parsers.parse('"{organizer}" has total revenue {amount:d}'))
def organizer_revenue(run, ledger: BlockSequencer, organizer: str, amount: int) -> None:
    account = run(ledger.call_read_only(LedgerOperation.GET_ORGANIZER_REVENUE, organizer=organizer))
    assert account.total_revenue == amount


@then(parsers.parse('"{owner}" owns tickets "{ticket_ids}"'))
def owned_tickets(run, ledger: BlockSequencer, owner: str, ticket_ids: str) -> None:
    index = run(ledger.call_read_only(LedgerOperation.GET_USER_TICKETS, owner=owner))
    assert index.owned_tickets == tuple(int(ticket_id) for ticket_id in ticket_ids.split(','))


@then(parsers.parse('the ledger holds {events:d} events and {tickets:d} tickets'))
def ledger_counts(run, ledger: BlockSequencer, events: int, tickets: int) -> None:
    assert run(ledger.call_read_only(LedgerOperation.GET_EVENT_COUNT)) == events
    assert run(ledger.call_read_only(LedgerOperation.GET_TICKET_COUNT)) == tickets


@then(parsers.parse('the platform fee on {amount:d} is {fee:d}'))
def platform_fee_is(run, ledger: BlockSequencer, amount: int, fee: int) -> None:
    assert run(ledger.call_read_only(LedgerOperation.CALCULATE_PLATFORM_FEE, amount=amount)) == fee
