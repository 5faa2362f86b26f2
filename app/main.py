# app/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import HOST, LOG_LEVEL, PORT
from app.routers import tickets  # Tickets router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# -------------------------
# Initialize FastAPI App
# -------------------------
app = FastAPI(title="Ticket API")

# -------------------------
# Root Route
# -------------------------
@app.get("/")
def read_root():
    return {"message": "Welcome to the Ticket API!"}

# -------------------------
# Include Routers
# -------------------------
app.include_router(tickets.router)

# -------------------------
# Malformed input -> 400
# -------------------------
@app.exception_handler(RequestValidationError)
async def bad_request_handler(request: Request, exc: RequestValidationError):
    logger.info("Bad request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "bad request", "errors": jsonable_encoder(exc.errors())},
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Ticket API on %s:%s", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
