from __future__ import annotations

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from ledger_balances.api.deps import get_balance_service
from ledger_balances.api.errors import register_exception_handlers
from ledger_balances.api.router import api_router
from ledger_balances.config import get_settings
from ledger_balances.services.balance_service import BalanceService
from tests.fakes import ISSUER, FakeBalanceSource, make_trustline


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set deterministic test env and reset cached Settings."""

    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("RIPPLED_URL", "http://rippled.test:51234/")
    monkeypatch.setenv("NATIVE_CURRENCY_CODE", "XRP")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_source() -> FakeBalanceSource:
    return FakeBalanceSource(trustlines=[make_trustline("USD", ISSUER, "50")])


@pytest.fixture
def api_app(fake_source: FakeBalanceSource) -> FastAPI:
    """Build API app backed by the in-memory balance source."""

    app = FastAPI()
    app.include_router(api_router, prefix="/api/v1")
    register_exception_handlers(app)
    app.dependency_overrides[get_balance_service] = lambda: BalanceService(fake_source)
    return app


@pytest_asyncio.fixture
async def api_client(api_app: FastAPI) -> httpx.AsyncClient:
    """ASGI client for API integration tests."""

    transport = httpx.ASGITransport(app=api_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
