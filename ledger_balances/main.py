"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ledger_balances.api.errors import register_exception_handlers
from ledger_balances.api.router import api_router
from ledger_balances.config import get_settings
from ledger_balances.ledger.connection import LedgerConnection
from ledger_balances.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the ledger connection on startup and close it on shutdown."""

    settings = get_settings()
    configure_logging(settings)

    connection = LedgerConnection.from_settings(settings)
    app.state.ledger_connection = connection
    try:
        yield
    finally:
        await connection.aclose()


settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
app.include_router(api_router, prefix=settings.api_v1_prefix)
register_exception_handlers(app)


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    """Liveness endpoint for uptime checks."""

    return {"status": "ok"}
