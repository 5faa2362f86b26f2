from pydantic import BaseModel, Field

TICKET_NOT_FOUND = "ticket not found"
TICKET_ID_MISMATCH = "ticket id did not match"

class Ticket(BaseModel):
    # strict: no bool/str/float coercion into ids or names
    id: int = Field(..., ge=0, le=255, strict=True)
    name: str = Field(..., strict=True)

class TicketError(BaseModel):
    id: int = Field(..., ge=0, le=255)
    err: str
