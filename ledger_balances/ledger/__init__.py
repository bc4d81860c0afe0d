"""Ledger package exports."""

from ledger_balances.ledger.connection import LedgerConnection
from ledger_balances.ledger.source import BalanceSource, RippledBalanceSource
from ledger_balances.ledger.version import LedgerVersionResolver

__all__ = ["LedgerConnection", "BalanceSource", "RippledBalanceSource", "LedgerVersionResolver"]
