# app/store.py
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Iterable, List, Optional, Union

from app.schemas.ticket import TICKET_NOT_FOUND, Ticket, TicketError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TicketNotFound:
    """No ticket matched ``id`` when the operation ran."""

    id: int

    def to_error(self) -> TicketError:
        return TicketError(id=self.id, err=TICKET_NOT_FOUND)


TicketResult = Union[Ticket, TicketNotFound]


class TicketStore:
    """
    In-memory ticket collection guarded by a single lock.

    Every operation holds the lock for its whole duration, reads included.
    Lookups are a linear scan and the first ticket with a matching id wins.
    Tickets going in and out are copied, so callers never share state
    with the stored list.
    """

    def __init__(self, tickets: Optional[Iterable[Ticket]] = None):
        self._lock = Lock()
        self._tickets: List[Ticket] = [t.model_copy() for t in tickets or []]

    def __len__(self) -> int:
        with self._lock:
            return len(self._tickets)

    def _index_of(self, ticket_id: int) -> Optional[int]:
        # caller holds the lock
        for index, ticket in enumerate(self._tickets):
            if ticket.id == ticket_id:
                return index
        return None

    def list(self) -> List[Ticket]:
        with self._lock:
            return [t.model_copy() for t in self._tickets]

    def create(self, ticket: Ticket) -> Ticket:
        # Duplicate ids are accepted; get/update/delete act on the first one.
        stored = ticket.model_copy()
        with self._lock:
            self._tickets.append(stored)
            size = len(self._tickets)
        logger.debug("created ticket id=%s (store size %d)", stored.id, size)
        return stored.model_copy()

    def get(self, ticket_id: int) -> TicketResult:
        with self._lock:
            index = self._index_of(ticket_id)
            if index is None:
                return TicketNotFound(id=ticket_id)
            return self._tickets[index].model_copy()

    def update(self, ticket_id: int, ticket: Ticket) -> TicketResult:
        """Replace the first ticket with ``ticket_id``.

        The caller must already have checked that ``ticket.id == ticket_id``.
        """
        stored = ticket.model_copy()
        with self._lock:
            index = self._index_of(ticket_id)
            if index is None:
                return TicketNotFound(id=ticket_id)
            self._tickets[index] = stored
        return stored.model_copy()

    def delete(self, ticket_id: int) -> TicketResult:
        with self._lock:
            index = self._index_of(ticket_id)
            if index is None:
                return TicketNotFound(id=ticket_id)
            return self._tickets.pop(index)

    def reset(self, tickets: Iterable[Ticket] = ()) -> None:
        fresh = [t.model_copy() for t in tickets]
        with self._lock:
            self._tickets = fresh
