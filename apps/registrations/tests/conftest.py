"""Shared fixtures for registration tests."""
import pytest


class RecordingDispatcher:
    """Collects notifications instead of sending them."""

    def __init__(self):
        self.sent = []

    def notify(self, profile, kind, context):
        self.sent.append((profile, kind, context))


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()
