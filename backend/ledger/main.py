from fastapi import FastAPI

from .routers import bookings, rooms, users
from .utils.request_id import request_id_middleware

app = FastAPI(title="Hotel Ledger API")

app.middleware("http")(request_id_middleware)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(rooms.router)
app.include_router(users.router)
app.include_router(bookings.router)
