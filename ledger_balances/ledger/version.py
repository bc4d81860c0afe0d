"""Ledger version resolution."""

from __future__ import annotations

from typing import Optional

from ledger_balances.ledger.source import BalanceSource


class LedgerVersionResolver:
    """Pick the ledger version a balance report is observed at."""

    def __init__(self, source: BalanceSource) -> None:
        self._source = source

    async def resolve(self, explicit: Optional[int] = None) -> int:
        """Return ``explicit`` unchanged, or query the current validated ledger index."""

        if explicit is not None:
            return explicit
        return await self._source.resolve_validated_ledger_index()
