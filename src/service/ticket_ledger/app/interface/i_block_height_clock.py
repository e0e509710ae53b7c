from abc import ABC, abstractmethod


class IBlockHeightClock(ABC):
    """Host-supplied monotonic height counter; the only notion of time in the ledger."""

    @abstractmethod
    def current_height(self) -> int:
        pass
