"""
Input shape checks run before any business rule.

The host's typed interface only admits unsigned integers and bounded UTF text;
these helpers reject anything that would not have survived that boundary.
"""

from typing import Any

from src.platform.logging.loguru_io import Logger
from src.service.ticket_ledger.domain.exception.ledger_error import InvalidParameterError


@Logger.io
def require_uint(**values: Any) -> None:
    for field, value in values.items():
        # bool is an int subclass but never a valid amount
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidParameterError(f'{field} must be an integer')
        if value < 0:
            raise InvalidParameterError(f'{field} must be non-negative')


@Logger.io
def require_bounded_text(*, field: str, value: Any, max_length: int) -> None:
    if not isinstance(value, str):
        raise InvalidParameterError(f'{field} must be a string')
    if len(value) > max_length:
        raise InvalidParameterError(f'{field} exceeds {max_length} characters')


@Logger.io
def require_identity(*, field: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameterError(f'{field} must be a non-empty identity')
