import pytest

from src.service.ticket_ledger.domain.entity.ticket_entity import Ticket
from src.service.ticket_ledger.domain.exception.ledger_error import TicketUsedError


@pytest.fixture
def ticket() -> Ticket:
    return Ticket.issue(
        ticket_id=7,
        event_id=1,
        owner='wallet-buyer-1',
        purchase_price=2_000_000,
        purchase_height=12,
    )


@pytest.mark.unit
class TestTicketLifecycle:
    def test_issued_ticket_is_fresh(self, ticket: Ticket) -> None:
        assert ticket.is_used is False
        assert ticket.is_refunded is False
        assert not ticket.is_terminal
        assert ticket.is_owned_by('wallet-buyer-1')

    def test_mark_as_used(self, ticket: Ticket) -> None:
        used = ticket.mark_as_used()

        assert used.is_used
        assert not used.is_refunded
        assert used.is_terminal

    def test_mark_as_refunded(self, ticket: Ticket) -> None:
        refunded = ticket.mark_as_refunded()

        assert refunded.is_refunded
        assert not refunded.is_used

    def test_used_ticket_cannot_be_used_again(self, ticket: Ticket) -> None:
        with pytest.raises(TicketUsedError):
            ticket.mark_as_used().mark_as_used()

    def test_used_ticket_cannot_be_refunded(self, ticket: Ticket) -> None:
        with pytest.raises(TicketUsedError):
            ticket.mark_as_used().mark_as_refunded()

    def test_refunded_ticket_reports_ticket_used(self, ticket: Ticket) -> None:
        with pytest.raises(TicketUsedError):
            ticket.mark_as_refunded().mark_as_used()
