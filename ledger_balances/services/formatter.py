"""Shaping of fetched ledger data into an ordered balance report."""

from __future__ import annotations

from typing import NamedTuple, Sequence

from ledger_balances.schemas.balance import Balance
from ledger_balances.schemas.options import BalanceOptions
from ledger_balances.schemas.trustline import TrustlineRecord


class FetchedBalances(NamedTuple):
    """Results of the two concurrent fetches, as handed to the formatter."""

    native: str
    trustlines: Sequence[TrustlineRecord]


def trustline_balance(record: TrustlineRecord) -> Balance:
    """Project a trustline record onto its currency, issuer and balance."""

    return Balance(
        currency=record.specification.currency,
        counterparty=record.specification.counterparty,
        value=record.state.balance,
    )


def should_include_native(options: BalanceOptions, native_currency: str = "XRP") -> bool:
    """Native balance is left out when the query targets an issuer or a non-native currency."""

    if options.counterparty:
        return False
    if options.currency and options.currency != native_currency:
        return False
    return True


class BalanceFormatter:
    """Build the balance report: native first, trustlines in fetched order, then limit."""

    def __init__(self, native_currency: str = "XRP") -> None:
        self.native_currency = native_currency

    def format(self, options: BalanceOptions, fetched: FetchedBalances) -> list[Balance]:
        """Return the ordered report, truncated from the end when a limit is set."""

        result = [trustline_balance(record) for record in fetched.trustlines]
        if should_include_native(options, self.native_currency):
            result.insert(0, Balance(currency=self.native_currency, value=fetched.native))
        if options.limit is not None and len(result) > options.limit:
            del result[options.limit :]
        return result
