"""conftest.py for benchmarks.

Provides a reusable event loop so async benchmarks do not pay for
``asyncio.new_event_loop()`` on every round.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def bench_loop():
    """Session-scoped event loop shared by all async benchmark helpers."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(bench_loop):
    """Helper that executes a coroutine factory in the session event loop.

    Usage inside a benchmark::

        def test_something(benchmark, run_async):
            benchmark(run_async, lambda: some_coroutine())
    """

    def _run(factory):
        return bench_loop.run_until_complete(factory())

    return _run
