"""Top-level API router aggregation."""

from fastapi import APIRouter

from ledger_balances.api.routes.balances import router as balances_router

api_router = APIRouter()
api_router.include_router(balances_router)
