import sys
from pathlib import Path

import httpx
import pytest

# Ensure repository root is on sys.path so `import core...` works without install
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.fetcher import ParliamentFetcher  # noqa: E402
from core.models import FetchOutcome, FetchSettings  # noqa: E402
from tools import client  # noqa: E402


@pytest.fixture
def sleeps():
    """Backoff delays requested by the fetcher, in order."""
    return []


@pytest.fixture
def make_fetcher(sleeps):
    """Build a ParliamentFetcher whose network is the given MockTransport handler."""

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    def _make(handler, **settings):
        return ParliamentFetcher(
            FetchSettings(**settings),
            transport=httpx.MockTransport(handler),
            sleep=fake_sleep,
        )

    return _make


class RecordingFetcher:
    """Stands in for the shared fetcher and remembers the exact URLs requested."""

    def __init__(self, body='{"ok":true}'):
        self.body = body
        self.urls = []

    async def fetch(self, url):
        self.urls.append(url)
        return FetchOutcome.success(url, self.body)


@pytest.fixture
def recorder(monkeypatch):
    fake = RecordingFetcher()
    monkeypatch.setattr(client, "_fetcher", fake)
    return fake
