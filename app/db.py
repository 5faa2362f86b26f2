# app/db.py
from app.seed import seed
from app.store import TicketStore

# Process-wide ticket store, seeded once at startup
db = seed(TicketStore())
