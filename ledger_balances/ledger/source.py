"""Ledger data sources consumed by the balance service."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from ledger_balances.api.errors import AccountNotFoundError, FetchError, LedgerError, ResolutionError, RippledError
from ledger_balances.ledger.amounts import drops_to_xrp
from ledger_balances.ledger.connection import LedgerConnection
from ledger_balances.ledger.trustlines import matches_currency, parse_account_line
from ledger_balances.schemas.options import BalanceOptions
from ledger_balances.schemas.trustline import TrustlineRecord

logger = logging.getLogger(__name__)


class BalanceSource(ABC):
    """Interface for the ledger queries the balance report is built from."""

    @abstractmethod
    async def resolve_validated_ledger_index(self) -> int:
        """Return the index of the most recent validated ledger."""

    @abstractmethod
    async def fetch_native_balance(self, address: str, ledger_version: int) -> str:
        """Return the native balance of ``address`` as a decimal string."""

    @abstractmethod
    async def fetch_trustlines(self, address: str, options: BalanceOptions) -> list[TrustlineRecord]:
        """Return trustlines of ``address`` selected by ``options``."""


class RippledBalanceSource(BalanceSource):
    """Balance source backed by rippled JSON-RPC commands."""

    def __init__(self, connection: LedgerConnection) -> None:
        self._connection = connection

    async def resolve_validated_ledger_index(self) -> int:
        """Query the ``ledger`` command for the latest validated ledger index."""

        try:
            result = await self._connection.request("ledger", ledger_index="validated")
            return int(result["ledger_index"])
        except LedgerError as exc:
            raise ResolutionError(f"Could not resolve validated ledger: {exc.message}") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise ResolutionError("ledger response carries no ledger_index") from exc

    async def fetch_native_balance(self, address: str, ledger_version: int) -> str:
        """Read the account's drop balance via ``account_info`` and render it in XRP."""

        try:
            result = await self._connection.request("account_info", account=address, ledger_index=ledger_version)
            return drops_to_xrp(result["account_data"]["Balance"])
        except LedgerError as exc:
            raise _fetch_error(address, ledger_version, exc) from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise FetchError(f"account_info response for {address} carries no balance") from exc

    async def fetch_trustlines(self, address: str, options: BalanceOptions) -> list[TrustlineRecord]:
        """Page through ``account_lines`` and keep lines matching the currency filter.

        ``limit`` counts matching records, so it is only sent to rippled as a page
        size when no currency filter is applied.
        """

        page_size = options.limit if options.currency is None else None
        records: list[TrustlineRecord] = []
        marker: Optional[Any] = None
        while True:
            try:
                result = await self._connection.request(
                    "account_lines",
                    account=address,
                    ledger_index=options.ledger_version or "validated",
                    peer=options.counterparty,
                    limit=page_size,
                    marker=marker,
                )
            except LedgerError as exc:
                raise _fetch_error(address, options.ledger_version, exc) from exc
            records.extend(self._parse_lines(address, result.get("lines", []), options.currency))
            marker = result.get("marker")
            if marker is None or (options.limit is not None and len(records) >= options.limit):
                break

        if options.limit is not None:
            records = records[: options.limit]
        return records

    @staticmethod
    def _parse_lines(address: str, lines: list[dict[str, Any]], currency: Optional[str]) -> list[TrustlineRecord]:
        """Parse one page of account_lines and drop lines outside the currency filter."""

        try:
            records = [parse_account_line(line) for line in lines]
        except (KeyError, TypeError, ValueError) as exc:
            raise FetchError(f"account_lines response for {address} is malformed") from exc
        return [record for record in records if matches_currency(record, currency)]


def _fetch_error(address: str, ledger_version: Optional[int], exc: LedgerError) -> FetchError:
    logger.warning("Fetch for %s at ledger %s failed: %s", address, ledger_version, exc.message)
    if isinstance(exc, RippledError) and exc.error == "actNotFound":
        return AccountNotFoundError(f"Account {address} not found at ledger {ledger_version}")
    return FetchError(f"Fetch for {address} failed: {exc.message}")
