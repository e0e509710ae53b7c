import attrs

from src.platform.logging.loguru_io import Logger


@attrs.define(frozen=True)
class OrganizerAccount:
    organizer: str
    events_organized: int = 0
    total_revenue: int = 0  # gross historical revenue, never decremented by refunds
    pending_withdrawals: int = 0

    @classmethod
    def open(cls, *, organizer: str) -> 'OrganizerAccount':
        return cls(organizer=organizer)

    @Logger.io
    def record_event_created(self) -> 'OrganizerAccount':
        return attrs.evolve(self, events_organized=self.events_organized + 1)

    @Logger.io
    def record_revenue(self, *, amount: int) -> 'OrganizerAccount':
        return attrs.evolve(self, total_revenue=self.total_revenue + amount)
