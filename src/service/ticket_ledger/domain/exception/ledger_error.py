from src.platform.exception.exceptions import DomainError
from src.service.ticket_ledger.domain.enum.ledger_error_code import LedgerErrorCode


class LedgerError(DomainError):
    """Rejected ledger operation; carries the integer code reported in receipts."""

    error_code: LedgerErrorCode


class NotAuthorizedError(LedgerError):
    error_code = LedgerErrorCode.NOT_AUTHORIZED

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(LedgerError):
    error_code = LedgerErrorCode.NOT_FOUND

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class SoldOutError(LedgerError):
    error_code = LedgerErrorCode.SOLD_OUT

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class TransferFailedError(LedgerError):
    error_code = LedgerErrorCode.TRANSFER_FAILED

    def __init__(self, message: str) -> None:
        super().__init__(message, 402)


class InvalidPriceError(LedgerError):
    error_code = LedgerErrorCode.INVALID_PRICE

    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class EventExpiredError(LedgerError):
    error_code = LedgerErrorCode.EVENT_EXPIRED

    def __init__(self, message: str) -> None:
        super().__init__(message, 410)


class TicketUsedError(LedgerError):
    error_code = LedgerErrorCode.TICKET_USED

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class RefundWindowClosedError(LedgerError):
    error_code = LedgerErrorCode.REFUND_WINDOW_CLOSED

    def __init__(self, message: str) -> None:
        super().__init__(message, 410)


class InvalidParameterError(LedgerError):
    error_code = LedgerErrorCode.INVALID_PARAMETER

    def __init__(self, message: str) -> None:
        super().__init__(message, 422)
