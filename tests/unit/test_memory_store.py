"""Unit tests for the in-memory ordered score store."""

import pytest

from rankboard.database.memory import MemoryMetadataStore, MemoryScoreStore
from rankboard.errors import MemberNotFound, MetadataNotFound

pytestmark = pytest.mark.asyncio


@pytest.fixture()
def store():
    return MemoryScoreStore('lb')


async def test_rank_is_descending_position(store):
    await store.upsert('user:1', 1000)
    await store.upsert('user:2', 5000)
    await store.upsert('user:3', 3000)

    assert await store.rank('user:2') == 0
    assert await store.rank('user:3') == 1
    assert await store.rank('user:1') == 2


async def test_missing_member(store):
    with pytest.raises(MemberNotFound):
        await store.rank('nobody')
    with pytest.raises(MemberNotFound):
        await store.score('nobody')


async def test_upsert_overwrites(store):
    await store.upsert('user:1', 1000)
    await store.upsert('user:1', 10)

    assert await store.score('user:1') == 10
    assert await store.count() == 1


async def test_increment_returns_new_score(store):
    assert await store.increment_by('user:1', 5) == 5
    assert await store.increment_by('user:1', -2) == 3
    assert await store.score('user:1') == 3


async def test_equal_scores_in_reverse_member_order(store):
    await store.upsert('a', 10)
    await store.upsert('c', 10)
    await store.upsert('b', 10)

    assert await store.range_desc(0, 2) == [('c', 10), ('b', 10), ('a', 10)]
    assert await store.rank('c') == 0
    assert await store.rank('a') == 2


async def test_range_clipped_to_size(store):
    for i in range(5):
        await store.upsert(f'user:{i}', i)

    assert await store.range_desc(3, 10) == [('user:1', 1), ('user:0', 0)]
    assert await store.range_desc(5, 9) == []


async def test_remove(store):
    await store.upsert('user:1', 1)

    assert await store.remove('user:1') is True
    assert await store.remove('user:1') is False
    assert await store.count() == 0


async def test_metadata_store():
    meta = MemoryMetadataStore()
    await meta.put('a', b'payload')

    assert await meta.get('a') == b'payload'
    with pytest.raises(MetadataNotFound):
        await meta.get('b')
