from enum import StrEnum


class LedgerOperation(StrEnum):
    # Mutating operations
    CREATE_EVENT = 'create-event'
    PURCHASE_TICKET = 'purchase-ticket'
    VALIDATE_TICKET = 'validate-ticket'
    REFUND_TICKET = 'refund-ticket'
    UPDATE_PLATFORM_FEE = 'update-platform-fee'
    UPDATE_MIN_TICKET_PRICE = 'update-min-ticket-price'

    # Read-only queries
    GET_EVENT = 'get-event'
    GET_TICKET = 'get-ticket'
    GET_ORGANIZER_REVENUE = 'get-organizer-revenue'
    GET_USER_TICKETS = 'get-user-tickets'
    CALCULATE_PLATFORM_FEE = 'calculate-platform-fee'
    GET_PLATFORM_CONFIG = 'get-platform-config'
    GET_EVENT_COUNT = 'get-event-count'
    GET_TICKET_COUNT = 'get-ticket-count'

    @property
    def is_read_only(self) -> bool:
        return self in _READ_ONLY_OPERATIONS


_READ_ONLY_OPERATIONS = frozenset(
    {
        LedgerOperation.GET_EVENT,
        LedgerOperation.GET_TICKET,
        LedgerOperation.GET_ORGANIZER_REVENUE,
        LedgerOperation.GET_USER_TICKETS,
        LedgerOperation.CALCULATE_PLATFORM_FEE,
        LedgerOperation.GET_PLATFORM_CONFIG,
        LedgerOperation.GET_EVENT_COUNT,
        LedgerOperation.GET_TICKET_COUNT,
    }
)
