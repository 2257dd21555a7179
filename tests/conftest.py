"""Shared fixtures: in-memory stores and leaderboards built on them."""

import pytest

from rankboard.core.leaderboard import Leaderboard
from rankboard.database.memory import MemoryMetadataStore, MemoryScoreStore


class CountingMetadataStore(MemoryMetadataStore):
    """Metadata store that records every call made to it."""

    def __init__(self):
        super().__init__()
        self.calls = []

    async def put(self, member_id, payload):
        self.calls.append(('put', member_id))
        await super().put(member_id, payload)

    async def get(self, member_id):
        self.calls.append(('get', member_id))
        return await super().get(member_id)


class CountingScoreStore(MemoryScoreStore):
    def __init__(self, name='test-board'):
        super().__init__(name)
        self.calls = []
        self.count_calls = 0

    async def count(self):
        self.count_calls += 1
        return await super().count()

    async def range_desc(self, start, end):
        self.calls.append(('range_desc', start, end))
        return await super().range_desc(start, end)


@pytest.fixture()
def scores():
    return CountingScoreStore()


@pytest.fixture()
def metadata():
    return CountingMetadataStore()


@pytest.fixture()
def board(scores, metadata):
    return Leaderboard('test-board', scores, metadata, page_size=10)

