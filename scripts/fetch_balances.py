"""Print the balance report of one account from the configured rippled server."""

from __future__ import annotations

import argparse
import asyncio
import json

from ledger_balances.config import get_settings
from ledger_balances.ledger.addresses import ensure_classic_address
from ledger_balances.ledger.connection import LedgerConnection
from ledger_balances.ledger.source import RippledBalanceSource
from ledger_balances.logging_config import configure_logging
from ledger_balances.schemas.options import BalanceOptions
from ledger_balances.services.balance_service import BalanceService


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("address")
    parser.add_argument("--ledger-version", type=int)
    parser.add_argument("--counterparty")
    parser.add_argument("--currency")
    parser.add_argument("--limit", type=int)
    return parser.parse_args()


async def main(args: argparse.Namespace) -> None:
    settings = get_settings()
    configure_logging(settings)

    options = BalanceOptions(
        ledger_version=args.ledger_version,
        counterparty=args.counterparty,
        currency=args.currency,
        limit=args.limit,
    )
    address = ensure_classic_address(args.address)

    connection = LedgerConnection.from_settings(settings)
    try:
        service = BalanceService(RippledBalanceSource(connection), native_currency=settings.native_currency_code)
        balances = await service.get_balances(address, options)
    finally:
        await connection.aclose()

    print(json.dumps([balance.model_dump(exclude_none=True) for balance in balances], indent=2))


if __name__ == "__main__":
    asyncio.run(main(parse_args()))
