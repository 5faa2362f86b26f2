# app/routers/tickets.py
import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from app.dependencies import get_store
from app.schemas.ticket import TICKET_ID_MISMATCH, Ticket, TicketError
from app.store import TicketNotFound, TicketStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["Tickets"])

TicketId = Annotated[int, Path(ge=0, le=255)]

ERROR_RESPONSES = {404: {"model": TicketError}}

# -----------------------------
# Helper: 404 response carrying the error body
# -----------------------------
def error_response(error: TicketError) -> JSONResponse:
    return JSONResponse(status_code=404, content=error.model_dump())

def not_found_response(outcome: TicketNotFound) -> JSONResponse:
    logger.info("Ticket %s not found", outcome.id)
    return error_response(outcome.to_error())

# -----------------------------
# LIST Tickets
# -----------------------------
@router.get("", response_model=List[Ticket])
def list_tickets(store: TicketStore = Depends(get_store)):
    return store.list()

# -----------------------------
# CREATE Ticket
# -----------------------------
@router.post("", response_model=Ticket)
def create_ticket(ticket: Ticket, store: TicketStore = Depends(get_store)):
    created = store.create(ticket)
    logger.debug("Ticket %s created", created.id)
    return created

# -----------------------------
# GET Ticket Detail
# -----------------------------
@router.get("/{ticket_id}", response_model=Ticket, responses=ERROR_RESPONSES)
def get_ticket(ticket_id: TicketId, store: TicketStore = Depends(get_store)):
    result = store.get(ticket_id)
    if isinstance(result, TicketNotFound):
        return not_found_response(result)
    return result

# -----------------------------
# UPDATE Ticket
# -----------------------------
@router.put("/{ticket_id}", response_model=Ticket, responses=ERROR_RESPONSES)
def update_ticket(
    ticket: Ticket,
    ticket_id: TicketId,
    store: TicketStore = Depends(get_store),
):
    # Body id must match the path id before the store is touched
    if ticket.id != ticket_id:
        logger.info("Ticket id mismatch: path %s, body %s", ticket_id, ticket.id)
        return error_response(TicketError(id=ticket_id, err=TICKET_ID_MISMATCH))

    result = store.update(ticket_id, ticket)
    if isinstance(result, TicketNotFound):
        return not_found_response(result)
    logger.debug("Ticket %s updated", ticket_id)
    return result

# -----------------------------
# DELETE Ticket
# -----------------------------
@router.delete("/{ticket_id}", response_model=Ticket, responses=ERROR_RESPONSES)
def delete_ticket(ticket_id: TicketId, store: TicketStore = Depends(get_store)):
    result = store.delete(ticket_id)
    if isinstance(result, TicketNotFound):
        return not_found_response(result)
    logger.debug("Ticket %s deleted", ticket_id)
    return result
