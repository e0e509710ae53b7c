"""
Payment Rail Interface

Value transfer between two identities. A transfer either fully succeeds or
raises before returning; callers invoke it only after every precondition has
passed and before committing any ledger write.
"""

from abc import ABC, abstractmethod

from src.service.ticket_ledger.app.dto.transfer_record import TransferRecord


class IPaymentRail(ABC):
    @abstractmethod
    async def transfer(self, *, sender: str, recipient: str, amount: int) -> TransferRecord:
        """
        Move amount from sender to recipient atomically

        Raises:
            TransferFailedError: insufficient funds or rejected transfer
        """
        pass
