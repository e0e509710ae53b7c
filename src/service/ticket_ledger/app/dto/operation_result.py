"""
Operation Result - tagged result returned to the host for every operation

ok(value): the operation committed (mutations acknowledge with True)
err(code): the operation was rejected and no state changed
"""

from typing import Any, Optional

import attrs

from src.service.ticket_ledger.domain.enum.ledger_error_code import LedgerErrorCode


@attrs.define(frozen=True)
class OperationResult:
    is_ok: bool
    value: Any = None
    error_code: Optional[LedgerErrorCode] = None
    message: str = ''

    @classmethod
    def ok(cls, value: Any = True) -> 'OperationResult':
        return cls(is_ok=True, value=value)

    @classmethod
    def err(cls, error_code: LedgerErrorCode, message: str = '') -> 'OperationResult':
        return cls(is_ok=False, error_code=error_code, message=message)

    @property
    def is_err(self) -> bool:
        return not self.is_ok
