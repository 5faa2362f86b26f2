from concurrent.futures import ThreadPoolExecutor

from app.schemas.ticket import Ticket
from app.store import TicketStore


def test_concurrent_creates_are_not_lost():
    store = TicketStore()
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda i: store.create(Ticket(id=i, name=f"t{i}")), range(256)))
    assert len(store) == 256
    assert sorted(t.id for t in store.list()) == list(range(256))

def test_concurrent_deletes_remove_each_ticket_once():
    store = TicketStore(Ticket(id=i, name=str(i)) for i in range(200))
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(store.delete, list(range(200)) * 2))
    removed = [r for r in results if isinstance(r, Ticket)]
    assert sorted(t.id for t in removed) == list(range(200))
    assert store.list() == []
