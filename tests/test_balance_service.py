from __future__ import annotations

import logging

import pytest

from ledger_balances.api.errors import AccountNotFoundError, FetchError, ResolutionError
from ledger_balances.schemas.options import BalanceOptions
from ledger_balances.services.balance_service import BalanceService
from tests.fakes import GENESIS, ISSUER, FakeBalanceSource, make_trustline


def _dump(report) -> list[dict]:
    return [balance.model_dump(exclude_none=True) for balance in report]


@pytest.fixture
def source() -> FakeBalanceSource:
    return FakeBalanceSource(native="100", trustlines=[make_trustline("USD", "rIssuer", "50")])


@pytest.mark.asyncio
async def test_native_and_trustlines_without_options(source: FakeBalanceSource) -> None:
    report = await BalanceService(source).get_balances(GENESIS)

    assert _dump(report) == [
        {"currency": "XRP", "value": "100"},
        {"currency": "USD", "counterparty": "rIssuer", "value": "50"},
    ]


@pytest.mark.asyncio
async def test_non_native_currency_suppresses_native(source: FakeBalanceSource) -> None:
    report = await BalanceService(source).get_balances(GENESIS, BalanceOptions(currency="USD"))

    assert _dump(report) == [{"currency": "USD", "counterparty": "rIssuer", "value": "50"}]


@pytest.mark.asyncio
async def test_counterparty_suppresses_native(source: FakeBalanceSource) -> None:
    report = await BalanceService(source).get_balances(GENESIS, BalanceOptions(counterparty=ISSUER))

    assert all(balance.currency != "XRP" for balance in report)
    assert source.trustline_calls[0][1].counterparty == ISSUER


@pytest.mark.asyncio
async def test_limit_keeps_native_entry(source: FakeBalanceSource) -> None:
    report = await BalanceService(source).get_balances(GENESIS, BalanceOptions(limit=1))

    assert _dump(report) == [{"currency": "XRP", "value": "100"}]


@pytest.mark.asyncio
async def test_explicit_ledger_version_skips_resolution(source: FakeBalanceSource) -> None:
    await BalanceService(source).get_balances(GENESIS, BalanceOptions(ledger_version=1000))

    assert source.resolve_calls == 0
    assert source.native_calls == [(GENESIS, 1000)]
    assert source.trustline_calls[0][1].ledger_version == 1000


@pytest.mark.asyncio
async def test_resolved_version_is_shared_by_both_fetches(source: FakeBalanceSource) -> None:
    source.validated_index = 777
    options = BalanceOptions(currency="USD", limit=5)

    await BalanceService(source).get_balances(GENESIS, options)

    assert source.resolve_calls == 1
    assert source.native_calls == [(GENESIS, 777)]
    forwarded = source.trustline_calls[0][1]
    assert forwarded.ledger_version == 777
    assert (forwarded.currency, forwarded.limit) == ("USD", 5)
    assert options.ledger_version is None


@pytest.mark.asyncio
async def test_fetches_overlap(source: FakeBalanceSource) -> None:
    await BalanceService(source).get_balances(GENESIS)

    assert source.events[:2] == ["native:start", "trustlines:start"]


@pytest.mark.asyncio
async def test_repeated_calls_with_explicit_version_are_identical(source: FakeBalanceSource) -> None:
    service = BalanceService(source)
    options = BalanceOptions(ledger_version=42)

    first = await service.get_balances(GENESIS, options)
    second = await service.get_balances(GENESIS, options)

    assert first == second


@pytest.mark.asyncio
async def test_resolution_failure_skips_fetches(source: FakeBalanceSource) -> None:
    source.resolve_error = ResolutionError("ledger unavailable")

    with pytest.raises(ResolutionError, match="ledger unavailable"):
        await BalanceService(source).get_balances(GENESIS)

    assert source.native_calls == []
    assert source.trustline_calls == []


@pytest.mark.asyncio
async def test_fetch_failure_waits_for_sibling(source: FakeBalanceSource) -> None:
    source.native_error = AccountNotFoundError("Account not found")

    with pytest.raises(AccountNotFoundError):
        await BalanceService(source).get_balances(GENESIS)

    assert "trustlines:end" in source.events


@pytest.mark.asyncio
async def test_trustline_failure_propagates(source: FakeBalanceSource) -> None:
    error = FetchError("account_lines failed")
    source.trustlines_error = error

    with pytest.raises(FetchError) as exc_info:
        await BalanceService(source).get_balances(GENESIS)

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_second_failure_is_logged(source: FakeBalanceSource, caplog: pytest.LogCaptureFixture) -> None:
    source.native_error = FetchError("native failed")
    source.trustlines_error = FetchError("trustlines failed")

    with caplog.at_level(logging.WARNING, logger="ledger_balances.services.balance_service"):
        with pytest.raises(FetchError, match="native failed"):
            await BalanceService(source).get_balances(GENESIS)

    assert "trustlines failed" in caplog.text
