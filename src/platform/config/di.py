"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
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
from src.service.ticket_ledger.app.query.get_event_use_case import GetEventUseCase
from src.service.ticket_ledger.app.query.get_organizer_revenue_use_case import (
    GetOrganizerRevenueUseCase,
)
from src.service.ticket_ledger.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticket_ledger.app.query.get_user_tickets_use_case import GetUserTicketsUseCase
from src.service.ticket_ledger.app.query.platform_config_query_use_case import (
    PlatformConfigQueryUseCase,
)
from src.service.ticket_ledger.driven_adapter.clock.block_height_clock_impl import (
    BlockHeightClockImpl,
)
from src.service.ticket_ledger.driven_adapter.payment.in_memory_payment_rail_impl import (
    InMemoryPaymentRailImpl,
)
from src.service.ticket_ledger.driven_adapter.state.in_memory_ledger_state import (
    InMemoryLedgerState,
)
from src.service.ticket_ledger.driven_adapter.state.in_memory_unit_of_work import (
    InMemoryUnitOfWork,
)
from src.service.ticket_ledger.driving_adapter.block_sequencer import BlockSequencer


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Host collaborators
    block_height_clock = providers.Singleton(
        BlockHeightClockImpl, genesis_height=config_service.provided.GENESIS_HEIGHT
    )
    payment_rail = providers.Singleton(InMemoryPaymentRailImpl, clock=block_height_clock)

    # Ledger state (singleton) and one unit of work per operation
    ledger_state = providers.Singleton(
        InMemoryLedgerState.initialize,
        owner=config_service.provided.PLATFORM_OWNER,
        platform_fee_percent=config_service.provided.DEFAULT_PLATFORM_FEE_PERCENT,
        min_ticket_price=config_service.provided.DEFAULT_MIN_TICKET_PRICE,
    )
    unit_of_work = providers.Factory(InMemoryUnitOfWork, state=ledger_state)

    # Command use cases
    create_event_use_case = providers.Singleton(
        CreateEventUseCase,
        uow_factory=unit_of_work.provider,
        clock=block_height_clock,
        max_refund_window=config_service.provided.MAX_REFUND_WINDOW,
        text_bounds=config_service.provided.EVENT_TEXT_BOUNDS,
    )
    purchase_ticket_use_case = providers.Singleton(
        PurchaseTicketUseCase,
        uow_factory=unit_of_work.provider,
        clock=block_height_clock,
        payment_rail=payment_rail,
        escrow_account=config_service.provided.ESCROW_ACCOUNT,
        restrict_purchase_after_event=config_service.provided.RESTRICT_PURCHASE_AFTER_EVENT,
    )
    validate_ticket_use_case = providers.Singleton(
        ValidateTicketUseCase, uow_factory=unit_of_work.provider
    )
    refund_ticket_use_case = providers.Singleton(
        RefundTicketUseCase,
        uow_factory=unit_of_work.provider,
        clock=block_height_clock,
        payment_rail=payment_rail,
        escrow_account=config_service.provided.ESCROW_ACCOUNT,
    )
    update_platform_fee_use_case = providers.Singleton(
        UpdatePlatformFeeUseCase, uow_factory=unit_of_work.provider
    )
    update_min_ticket_price_use_case = providers.Singleton(
        UpdateMinTicketPriceUseCase, uow_factory=unit_of_work.provider
    )

    # Query use cases
    get_event_use_case = providers.Singleton(GetEventUseCase, uow_factory=unit_of_work.provider)
    get_ticket_use_case = providers.Singleton(GetTicketUseCase, uow_factory=unit_of_work.provider)
    get_organizer_revenue_use_case = providers.Singleton(
        GetOrganizerRevenueUseCase, uow_factory=unit_of_work.provider
    )
    get_user_tickets_use_case = providers.Singleton(
        GetUserTicketsUseCase, uow_factory=unit_of_work.provider
    )
    platform_config_query_use_case = providers.Singleton(
        PlatformConfigQueryUseCase, uow_factory=unit_of_work.provider
    )

    # Host-facing entry point
    block_sequencer = providers.Singleton(
        BlockSequencer,
        clock=block_height_clock,
        create_event_use_case=create_event_use_case,
        purchase_ticket_use_case=purchase_ticket_use_case,
        validate_ticket_use_case=validate_ticket_use_case,
        refund_ticket_use_case=refund_ticket_use_case,
        update_platform_fee_use_case=update_platform_fee_use_case,
        update_min_ticket_price_use_case=update_min_ticket_price_use_case,
        get_event_use_case=get_event_use_case,
        get_ticket_use_case=get_ticket_use_case,
        get_organizer_revenue_use_case=get_organizer_revenue_use_case,
        get_user_tickets_use_case=get_user_tickets_use_case,
        platform_config_query_use_case=platform_config_query_use_case,
    )


container = Container()
