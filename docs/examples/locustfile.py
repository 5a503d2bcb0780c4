"""Locust load-test: flag-evaluation traffic mix.

Every flag-aware request fans out to three flag lookups, so this mix is
mostly those endpoints, with the probes polled the way an orchestrator
would poll them.

Run with::

    pip install -e ".[load]"
    locust -f docs/examples/locustfile.py --host=http://localhost:3000

Headless run against a target SLO::

    locust -f docs/examples/locustfile.py \\
        --host=http://localhost:3000 \\
        --users=100 --spawn-rate=10 \\
        --run-time=60s --headless

Endpoints exercised
-------------------
GET /                 – info + flags (weight 5)
GET /features         – full flag map (weight 3)
GET /demo/{userType}  – targeting demo (weight 3)
GET /ready            – readiness probe (weight 1)

User keys are drawn from a fixed pool so percentage rollouts bucket the
same users consistently across a run.

Metrics to watch
----------------
- p95 / p99 latency on ``/`` versus ``/health`` (flag evaluation overhead)
- Error rate < 0.1 %
- ``/ready`` 503s, which mean the SDK lost its stream
"""

from __future__ import annotations

import random

from locust import HttpUser, between, task

INDEX_WEIGHT = 5
FEATURES_WEIGHT = 3
DEMO_WEIGHT = 3
PROBE_WEIGHT = 1

_USER_POOL: list[str] = [f"user-{n:04d}" for n in range(500)]
_USER_TYPES: tuple[str, ...] = ("anonymous", "beta-tester", "internal", "canary", "premium")


def _random_user() -> str:
    return random.choice(_USER_POOL)


class FlagResponderUser(HttpUser):
    """Simulates a client of the flag responder.

    Wait between 50 ms and 500 ms between consecutive requests to model
    realistic think time.
    """

    wait_time = between(0.05, 0.5)

    @task(INDEX_WEIGHT)
    def index(self) -> None:
        with self.client.get(
            "/",
            params={"userId": _random_user()},
            name="/ [index]",
            catch_response=True,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Unexpected status: {resp.status_code}")
            elif "featureFlags" not in resp.json():
                resp.failure("featureFlags missing")

    @task(FEATURES_WEIGHT)
    def features(self) -> None:
        with self.client.get(
            "/features",
            params={"userId": _random_user()},
            name="/features",
            catch_response=True,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Unexpected status: {resp.status_code}")

    @task(DEMO_WEIGHT)
    def demo(self) -> None:
        with self.client.get(
            f"/demo/{random.choice(_USER_TYPES)}",
            name="/demo/{userType}",
            catch_response=True,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Unexpected status: {resp.status_code}")

    @task(PROBE_WEIGHT)
    def ready(self) -> None:
        with self.client.get("/ready", name="/ready", catch_response=True) as resp:
            if resp.status_code not in (200, 503):
                resp.failure(f"Unexpected status: {resp.status_code}")

    def on_start(self) -> None:
        """Probe /health before the test starts; abort if unavailable."""
        resp = self.client.get("/health", name="/health [probe]")
        if resp.status_code != 200:
            self.environment.runner.quit()
