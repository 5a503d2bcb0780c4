"""Integration tests: the full app against a real ``ldclient.LDClient``.

The SDK is fed by its ``TestData`` source instead of the LaunchDarkly
service, so these run in-process without network access.
Run with: pytest tests/integration -m integration -v
"""
from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from ldclient.client import LDClient
from ldclient.config import Config
from ldclient.integrations.test_data import TestData

from flag_responder.adapters.fastapi import create_app
from flag_responder.adapters.launchdarkly import LaunchDarklyFeatureFlagProvider
from flag_responder.config.settings import AppSettings

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def td() -> TestData:
    data = TestData.data_source()
    data.update(data.flag("new-ui-feature").boolean_flag().variation_for_all(False))
    data.update(data.flag("dark-mode").boolean_flag().variation_for_all(True))
    data.update(
        data.flag("beta-features")
        .boolean_flag()
        .variation_for_all(False)
        .variation_for_key("user", "beta-tester", True)
    )
    return data


@pytest.fixture
def client(td: TestData) -> Iterator[TestClient]:
    def factory(settings: AppSettings) -> LaunchDarklyFeatureFlagProvider:
        config = Config(
            sdk_key=settings.launchdarkly_sdk_key,
            update_processor_class=td,
            send_events=False,
        )
        return LaunchDarklyFeatureFlagProvider(
            LDClient(config=config, start_wait=settings.ld_start_wait_seconds)
        )

    app = create_app(
        AppSettings(launchdarkly_sdk_key="sdk-test", environment="test"),
        provider_factory=factory,
    )
    with TestClient(app) as test_client:
        yield test_client


# ---------------------------------------------------------------------------
# tests
# ---------------------------------------------------------------------------


class TestAgainstSdk:
    def test_connected_not_fallback(self, client: TestClient) -> None:
        body = client.get("/features", params={"userId": "alice"}).json()
        assert body["launchDarklyConnected"] is True
        assert body["features"] == {
            "new-ui-feature": False,
            "dark-mode": True,
            "beta-features": False,
        }

    def test_targeted_user_gets_beta(self, client: TestClient) -> None:
        body = client.get("/demo/beta-tester").json()
        assert body["betaAccess"] is True
        assert body["theme"] == "dark"
        assert "UI Clásica" in body["message"]

    def test_untargeted_user(self, client: TestClient) -> None:
        assert client.get("/demo/alice").json()["betaAccess"] is False

    def test_flag_change_seen_by_next_request(self, client: TestClient, td: TestData) -> None:
        assert client.get("/").json()["featureFlags"]["newUIEnabled"] is False
        td.update(td.flag("new-ui-feature").boolean_flag().variation_for_all(True))
        assert client.get("/").json()["featureFlags"]["newUIEnabled"] is True

    def test_ready(self, client: TestClient) -> None:
        resp = client.get("/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ready"}
