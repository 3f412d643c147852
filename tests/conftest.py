"""Pytest fixtures for event emitter tests."""

import pytest

from event_emitter.lib.events import EventEmitter


class Recorder:
    """Listener factory that records every call in one shared, ordered log."""

    def __init__(self):
        self.calls: list[tuple] = []

    def listener(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs) if kwargs else (name, args))

        record.__name__ = f"listener_{name}"
        return record

    def names(self) -> list:
        return [call[0] for call in self.calls]


class MockSubscriber:
    """Object exposing a bound-method listener."""

    def __init__(self):
        self.received = []

    def handle(self, *args):
        self.received.append(args)


@pytest.fixture
def emitter():
    """Create a fresh EventEmitter for each test."""
    return EventEmitter()


@pytest.fixture
def recorder():
    """Create a Recorder for checking invocation order."""
    return Recorder()


@pytest.fixture
def subscriber():
    """Create a MockSubscriber whose bound method can be registered."""
    return MockSubscriber()
