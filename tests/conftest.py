from datetime import datetime, timedelta, timezone

import pytest

from promptlib.repository import PromptRepository
from promptlib.store import MemoryStore


class TickingClock:
    """Returns a time one second later on every call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def repo(tmp_path, memory_store, clock):
    return PromptRepository(tmp_path / "prompts.json", store=memory_store, clock=clock)


@pytest.fixture
def file_repo(tmp_path, clock):
    return PromptRepository(tmp_path / "data" / "prompts.json", clock=clock)
