# app/dependencies.py
from app.db import db
from app.store import TicketStore

def get_store() -> TicketStore:
    return db
