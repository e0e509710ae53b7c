"""
Ledger Error Codes

Integer codes reported in failed receipts. Values 1, 3, 5, 6, 10 and 11 form the
compatibility table and must never change.
"""

from enum import IntEnum


class LedgerErrorCode(IntEnum):
    NOT_AUTHORIZED = 1
    NOT_FOUND = 2
    SOLD_OUT = 3
    TRANSFER_FAILED = 4
    INVALID_PRICE = 5  # also raised for refund windows above the ceiling
    EVENT_EXPIRED = 6
    TICKET_USED = 10  # also raised for refunded tickets
    REFUND_WINDOW_CLOSED = 11
    INVALID_PARAMETER = 12
