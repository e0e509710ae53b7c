from src.service.ticket_ledger.app.interface.i_block_height_clock import IBlockHeightClock


class BlockHeightClockImpl(IBlockHeightClock):
    def __init__(self, *, genesis_height: int = 0) -> None:
        self._height = genesis_height

    def current_height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        if blocks < 1:
            raise ValueError('Block height must strictly increase')
        self._height += blocks
        return self._height
