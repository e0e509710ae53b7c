"""
Block Sequencer - host-facing entry point of the ledger

The host groups transactions into blocks. Each block advances the height by one,
then every transaction runs in order against the state left by the previous one.
A rejected transaction yields an err receipt and never affects its siblings.
"""

import inspect
import time
from typing import Any, Awaitable, Callable, Iterable

import attrs

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.service.ticket_ledger.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticket_ledger.app.command.purchase_ticket_use_case import PurchaseTicketUseCase
from src.service.ticket_ledger.app.command.refund_ticket_use_case import RefundTicketUseCase
from src.service.ticket_ledger.app.command.update_min_ticket_price_use_case import (
    UpdateMinTicketPriceUseCase,
)
from src.service.ticket_ledger.app.command.update_platform_fee_use_case import (
    UpdatePlatformFeeUseCase,
)
from src.service.ticket_ledger.app.command.validate_ticket_use_case import ValidateTicketUseCase
from src.service.ticket_ledger.app.dto.operation_result import OperationResult
from src.service.ticket_ledger.app.query.get_event_use_case import GetEventUseCase
from src.service.ticket_ledger.app.query.get_organizer_revenue_use_case import (
    GetOrganizerRevenueUseCase,
)
from src.service.ticket_ledger.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticket_ledger.app.query.get_user_tickets_use_case import GetUserTicketsUseCase
from src.service.ticket_ledger.app.query.platform_config_query_use_case import (
    PlatformConfigQueryUseCase,
)
from src.service.ticket_ledger.domain.enum.ledger_operation import LedgerOperation
from src.service.ticket_ledger.domain.exception.ledger_error import (
    InvalidParameterError,
    LedgerError,
)
from src.service.ticket_ledger.driven_adapter.clock.block_height_clock_impl import (
    BlockHeightClockImpl,
)


@attrs.define(frozen=True)
class Tx:
    operation: LedgerOperation
    caller: str
    params: dict[str, Any] = attrs.field(factory=dict)

    @classmethod
    def call(cls, operation: LedgerOperation, *, caller: str, **params: Any) -> 'Tx':
        return cls(operation=operation, caller=caller, params=params)


@attrs.define(frozen=True)
class Receipt:
    tx: Tx
    result: OperationResult


@attrs.define(frozen=True)
class Block:
    height: int
    receipts: tuple[Receipt, ...]


class BlockSequencer:
    def __init__(
        self,
        *,
        clock: BlockHeightClockImpl,
        create_event_use_case: CreateEventUseCase,
        purchase_ticket_use_case: PurchaseTicketUseCase,
        validate_ticket_use_case: ValidateTicketUseCase,
        refund_ticket_use_case: RefundTicketUseCase,
        update_platform_fee_use_case: UpdatePlatformFeeUseCase,
        update_min_ticket_price_use_case: UpdateMinTicketPriceUseCase,
        get_event_use_case: GetEventUseCase,
        get_ticket_use_case: GetTicketUseCase,
        get_organizer_revenue_use_case: GetOrganizerRevenueUseCase,
        get_user_tickets_use_case: GetUserTicketsUseCase,
        platform_config_query_use_case: PlatformConfigQueryUseCase,
    ) -> None:
        self.clock = clock
        self._commands: dict[LedgerOperation, Callable[..., Awaitable[Any]]] = {
            LedgerOperation.CREATE_EVENT: create_event_use_case.execute,
            LedgerOperation.PURCHASE_TICKET: purchase_ticket_use_case.execute,
            LedgerOperation.VALIDATE_TICKET: validate_ticket_use_case.execute,
            LedgerOperation.REFUND_TICKET: refund_ticket_use_case.execute,
            LedgerOperation.UPDATE_PLATFORM_FEE: update_platform_fee_use_case.execute,
            LedgerOperation.UPDATE_MIN_TICKET_PRICE: update_min_ticket_price_use_case.execute,
        }
        self._queries: dict[LedgerOperation, Callable[..., Awaitable[Any]]] = {
            LedgerOperation.GET_EVENT: get_event_use_case.execute,
            LedgerOperation.GET_TICKET: get_ticket_use_case.execute,
            LedgerOperation.GET_ORGANIZER_REVENUE: get_organizer_revenue_use_case.execute,
            LedgerOperation.GET_USER_TICKETS: get_user_tickets_use_case.execute,
            LedgerOperation.CALCULATE_PLATFORM_FEE: platform_config_query_use_case.calculate_platform_fee,
            LedgerOperation.GET_PLATFORM_CONFIG: platform_config_query_use_case.get_platform_config,
            LedgerOperation.GET_EVENT_COUNT: platform_config_query_use_case.get_event_count,
            LedgerOperation.GET_TICKET_COUNT: platform_config_query_use_case.get_ticket_count,
        }

    @property
    def current_height(self) -> int:
        return self.clock.current_height()

    async def mine_block(self, txs: Iterable[Tx]) -> Block:
        height = self._advance(1)
        receipts = []
        for tx in txs:
            receipts.append(Receipt(tx=tx, result=await self.apply(tx)))

        Logger.base.info(
            f'⛏️ [BLOCK] Height {height}: {sum(r.result.is_ok for r in receipts)}/{len(receipts)} ok'
        )
        return Block(height=height, receipts=tuple(receipts))

    def mine_empty_block(self) -> int:
        return self._advance(1)

    def mine_empty_blocks(self, count: int) -> int:
        return self._advance(count)

    async def apply(self, tx: Tx) -> OperationResult:
        start_time = time.perf_counter()
        try:
            handler = self._resolve(tx)
            result = OperationResult.ok(await handler(caller=tx.caller, **tx.params))
        except LedgerError as e:
            result = OperationResult.err(e.error_code, e.message)

        metrics.record_operation(
            operation=tx.operation.value,
            result='ok' if result.is_ok else result.error_code.name.lower(),
            duration=time.perf_counter() - start_time,
        )
        return result

    def _resolve(self, tx: Tx) -> Callable[..., Awaitable[Any]]:
        """
        Raises:
            InvalidParameterError: query operation, or params that do not fit the handler
        """
        handler = self._commands.get(tx.operation)
        if handler is None:
            Logger.base.warning(f'⚠️ [BLOCK] {tx.operation} cannot be submitted as a transaction')
            raise InvalidParameterError(f'{tx.operation} is not a mutating operation')

        try:
            inspect.signature(handler).bind(caller=tx.caller, **tx.params)
        except TypeError as e:
            raise InvalidParameterError(f'Malformed {tx.operation} parameters: {e}') from e
        return handler

    async def call_read_only(self, operation: LedgerOperation, **params: Any) -> Any:
        handler = self._queries.get(operation)
        if handler is None:
            raise ValueError(f'{operation} is not a read-only operation')
        return await handler(**params)

    def _advance(self, blocks: int) -> int:
        height = self.clock.advance(blocks)
        metrics.update_block_height(height=height)
        return height
