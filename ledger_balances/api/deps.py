"""Dependency helpers for API layer."""

from typing import Optional

from fastapi import Depends, Query, Request
from pydantic import ValidationError as PydanticValidationError

from ledger_balances.api.errors import ValidationError
from ledger_balances.config import Settings, get_settings
from ledger_balances.ledger.addresses import ensure_classic_address
from ledger_balances.ledger.connection import LedgerConnection
from ledger_balances.ledger.source import RippledBalanceSource
from ledger_balances.schemas.options import BalanceOptions
from ledger_balances.services.balance_service import BalanceService


def get_connection(request: Request) -> LedgerConnection:
    """Return the ledger connection opened by the application lifespan."""

    return request.app.state.ledger_connection


def get_balance_service(
    connection: LedgerConnection = Depends(get_connection),
    settings: Settings = Depends(get_settings),
) -> BalanceService:
    """Build balance service dependency."""

    return BalanceService(RippledBalanceSource(connection), native_currency=settings.native_currency_code)


def get_account_address(address: str) -> str:
    """Normalize the path address to its classic form."""

    return ensure_classic_address(address)


def get_balance_options(
    ledger_version: Optional[int] = Query(default=None, ge=1),
    counterparty: Optional[str] = Query(default=None),
    currency: Optional[str] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=0),
) -> BalanceOptions:
    """Collect query parameters into validated balance options."""

    try:
        return BalanceOptions(ledger_version=ledger_version, counterparty=counterparty, currency=currency, limit=limit)
    except PydanticValidationError as exc:
        messages = "; ".join(str(error["msg"]) for error in exc.errors())
        raise ValidationError(messages) from exc
