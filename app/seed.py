# app/seed.py
import logging

from app.schemas.ticket import Ticket
from app.store import TicketStore

logger = logging.getLogger(__name__)

SEED_TICKETS = [
    Ticket(id=1, name="Anuj"),
    Ticket(id=2, name="Goldy"),
]

def seed(store: TicketStore) -> TicketStore:
    """Reset the store so it holds exactly the seed tickets."""
    store.reset(SEED_TICKETS)
    logger.info("Seeded %d tickets", len(SEED_TICKETS))
    return store
