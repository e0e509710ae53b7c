import attrs


@attrs.define(frozen=True)
class TransferRecord:
    sender: str
    recipient: str
    amount: int
    height: int
