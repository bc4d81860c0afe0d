"""Parsing of rippled account_lines entries into trustline records."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ledger_balances.schemas.trustline import (
    TrustlineCounterpartyState,
    TrustlineRecord,
    TrustlineSpecification,
    TrustlineState,
)

QUALITY_ONE = Decimal(1_000_000_000)


def parse_quality(quality: Optional[int]) -> Optional[Decimal]:
    """Quality is an integer ratio scaled by 1e9; zero means the default (unset)."""

    if not quality:
        return None
    return Decimal(quality) / QUALITY_ONE


def _flag(value: Any) -> Optional[bool]:
    """rippled omits unset flags; keep them unset instead of False."""

    return True if value else None


def parse_account_line(line: dict[str, Any]) -> TrustlineRecord:
    """Build a trustline record from one account_lines entry."""

    specification = TrustlineSpecification(
        limit=line["limit"],
        currency=line["currency"],
        counterparty=line["account"],
        quality_in=parse_quality(line.get("quality_in")),
        quality_out=parse_quality(line.get("quality_out")),
        rippling_disabled=_flag(line.get("no_ripple")),
        authorized=_flag(line.get("authorized")),
        frozen=_flag(line.get("freeze")),
    )
    counterparty = TrustlineCounterpartyState(
        limit=line.get("limit_peer", "0"),
        rippling_disabled=_flag(line.get("no_ripple_peer")),
        frozen=_flag(line.get("freeze_peer")),
        authorized=_flag(line.get("peer_authorized")),
    )
    return TrustlineRecord(
        specification=specification,
        counterparty=counterparty,
        state=TrustlineState(balance=line["balance"]),
    )


def matches_currency(record: TrustlineRecord, currency: Optional[str]) -> bool:
    """True when no currency filter is set or the record is in that currency."""

    return currency is None or record.specification.currency == currency
