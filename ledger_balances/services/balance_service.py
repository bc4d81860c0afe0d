"""Balance report service."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ledger_balances.ledger.source import BalanceSource
from ledger_balances.ledger.version import LedgerVersionResolver
from ledger_balances.schemas.balance import Balance
from ledger_balances.schemas.options import BalanceOptions
from ledger_balances.services.formatter import BalanceFormatter, FetchedBalances

logger = logging.getLogger(__name__)


class BalanceService:
    """Native and trustline balances of one account at a single ledger version."""

    def __init__(self, source: BalanceSource, native_currency: str = "XRP") -> None:
        self._source = source
        self._resolver = LedgerVersionResolver(source)
        self._formatter = BalanceFormatter(native_currency)

    async def get_balances(self, address: str, options: Optional[BalanceOptions] = None) -> list[Balance]:
        """Return the balance report of an already normalized classic address.

        The ledger version is resolved once and both fetches run concurrently
        against it. If either fetch fails the call fails after both settle;
        no partial report is returned.
        """
        options = options or BalanceOptions()
        ledger_version = await self._resolver.resolve(options.ledger_version)
        trustline_options = options.model_copy(update={"ledger_version": ledger_version})

        native_result, trustlines_result = await asyncio.gather(
            self._source.fetch_native_balance(address, ledger_version),
            self._source.fetch_trustlines(address, trustline_options),
            return_exceptions=True,
        )

        failures = [r for r in (native_result, trustlines_result) if isinstance(r, BaseException)]
        if failures:
            for extra in failures[1:]:
                logger.warning("Additional balance fetch failure for %s: %r", address, extra)
            raise failures[0]

        logger.debug("Fetched balances for %s at ledger %s", address, ledger_version)
        return self._formatter.format(options, FetchedBalances(native=native_result, trustlines=trustlines_result))
