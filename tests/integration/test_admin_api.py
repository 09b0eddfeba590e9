from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from bridgeindex.api.deps import get_orchestrator, get_settings
from bridgeindex.api.main import app
from bridgeindex.config import Settings
from bridgeindex.domain.models import EnrichmentSummary, FetchRunSummary, ProviderFetchResult

ADMIN_SECRET = "admin-s3cret"
CRON_SECRET = "cron-s3cret"


def _summary() -> FetchRunSummary:
    return FetchRunSummary(
        results=[
            ProviderFetchResult(provider="relay", success=True, chains_count=80, tokens_count=400),
            ProviderFetchResult(provider="mayan", success=False, error="[mayan] Fetch operation failed: timeout"),
        ],
        total=2,
        successes=1,
        failures=1,
        enrichment=EnrichmentSummary(enriched_count=75, total_chains=1800),
        duration_ms=1234,
    )


@pytest.fixture()
def orchestrator():
    orch = AsyncMock()
    orch.run_full_fetch.return_value = _summary()
    return orch


def _client_for(settings: Settings, orchestrator) -> AsyncClient:
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture()
async def client(orchestrator):
    async with _client_for(Settings(admin_secret=ADMIN_SECRET, cron_secret=CRON_SECRET), orchestrator) as ac:
        yield ac
    app.dependency_overrides.clear()


class TestAdminFetchAPI:
    async def test_manual_trigger(self, client, orchestrator):
        res = await client.post("/api/admin/fetch", headers={"x-admin-secret": ADMIN_SECRET})
        assert res.status_code == 200
        data = res.json()
        assert data["triggered_by"] == "manual"
        assert data["total"] == 2
        assert data["successes"] == 1
        assert data["failures"] == 1
        assert data["enrichment"] == {"enriched_count": 75, "total_chains": 1800}
        assert data["results"][1]["error"] == "[mayan] Fetch operation failed: timeout"
        orchestrator.run_full_fetch.assert_awaited_once()

    async def test_cron_trigger_via_get(self, client):
        res = await client.get("/api/admin/fetch", headers={"Authorization": f"Bearer {CRON_SECRET}"})
        assert res.status_code == 200
        assert res.json()["triggered_by"] == "cron"

    async def test_wrong_secret(self, client, orchestrator):
        res = await client.post("/api/admin/fetch", headers={"x-admin-secret": "nope"})
        assert res.status_code == 401
        orchestrator.run_full_fetch.assert_not_called()

    async def test_missing_credentials(self, client, orchestrator):
        res = await client.post("/api/admin/fetch")
        assert res.status_code == 401
        orchestrator.run_full_fetch.assert_not_called()

    async def test_cron_secret_without_bearer_prefix(self, client):
        res = await client.get("/api/admin/fetch", headers={"Authorization": CRON_SECRET})
        assert res.status_code == 401

    async def test_admin_secret_not_accepted_as_bearer(self, client):
        res = await client.get("/api/admin/fetch", headers={"Authorization": f"Bearer {ADMIN_SECRET}"})
        assert res.status_code == 401


class TestAdminNotConfigured:
    async def test_no_secrets_configured(self, orchestrator):
        try:
            async with _client_for(Settings(admin_secret="", cron_secret=""), orchestrator) as ac:
                res = await ac.post("/api/admin/fetch", headers={"x-admin-secret": ""})
        finally:
            app.dependency_overrides.clear()

        assert res.status_code == 500
        assert res.json()["detail"] == "Admin secret not configured"
        orchestrator.run_full_fetch.assert_not_called()

    async def test_cron_only(self, orchestrator):
        try:
            async with _client_for(Settings(admin_secret="", cron_secret=CRON_SECRET), orchestrator) as ac:
                manual = await ac.post("/api/admin/fetch", headers={"x-admin-secret": ""})
                cron = await ac.post("/api/admin/fetch", headers={"Authorization": f"Bearer {CRON_SECRET}"})
        finally:
            app.dependency_overrides.clear()

        assert manual.status_code == 401
        assert cron.status_code == 200
