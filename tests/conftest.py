"""Shared pytest configuration: headless Qt and inline thread pools."""

import os

import pytest

# Widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ImmediateThreadPool:
    """Runs each worker synchronously on start(), so signals deliver inline."""

    def __init__(self):
        self.started = []

    def start(self, runnable):
        self.started.append(runnable)
        runnable.run()


class DeferredThreadPool:
    """Queues workers until the test runs them explicitly."""

    def __init__(self):
        self.queue = []

    def start(self, runnable):
        self.queue.append(runnable)

    def run_next(self):
        runnable = self.queue.pop(0)
        runnable.run()
        return runnable

    def run_all(self):
        while self.queue:
            self.run_next()


@pytest.fixture
def immediate_pool():
    return ImmediateThreadPool()


@pytest.fixture
def deferred_pool():
    return DeferredThreadPool()
