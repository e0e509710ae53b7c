import attrs


@attrs.define(frozen=True)
class UserTicketIndex:
    """Append-only list of ticket ids a buyer has purchased, in purchase order."""

    owner: str
    owned_tickets: tuple[int, ...] = attrs.field(default=(), converter=tuple)

    @classmethod
    def open(cls, *, owner: str) -> 'UserTicketIndex':
        return cls(owner=owner)

    def append(self, *, ticket_id: int) -> 'UserTicketIndex':
        return attrs.evolve(self, owned_tickets=(*self.owned_tickets, ticket_id))
