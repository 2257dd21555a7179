"""Unit tests for settings validation and the leaderboard manager."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import redis
from pydantic import ValidationError

from rankboard.config import LeaderboardConfig
from rankboard.core.naming import Environment
from rankboard.database.base import LeaderboardManager
from rankboard.database.connection import RedisConnection
from rankboard.database.redis_store import RedisMetadataStore, RedisScoreStore
from rankboard.errors import BackendUnavailable


class TestLeaderboardConfig:
    def test_mode_parsed(self):
        assert LeaderboardConfig(MODE='staging').MODE is Environment.STAGING

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            LeaderboardConfig(MODE='qa')

    def test_page_size_falls_back(self):
        assert LeaderboardConfig(PAGE_SIZE=7).PAGE_SIZE == 25
        assert LeaderboardConfig(PAGE_SIZE=50).PAGE_SIZE == 50


@pytest.mark.asyncio
class TestLeaderboardManager:
    async def test_builds_named_redis_leaderboard(self):
        manager = await LeaderboardManager.get_instance()
        manager.connection = MagicMock()
        manager.connection.initialize = AsyncMock()
        manager.connection.close = AsyncMock()
        manager.app_id = 'game'
        manager.mode = Environment.PRODUCTION
        manager.page_size = 50

        try:
            board = await manager.get_leaderboard('kills')

            manager.connection.initialize.assert_awaited_once()
            assert board.name == 'game-kills-production'
            assert board.page_size == 50
            assert isinstance(board.scores, RedisScoreStore)
            assert board.scores.key == 'game-kills-production'
            assert isinstance(board.metadata, RedisMetadataStore)
            assert board.metadata.namespace == 'game-production-users'
        finally:
            await manager.close()

        manager.connection.close.assert_awaited_once()
        assert LeaderboardManager._instance is None

    async def test_singleton(self):
        first = await LeaderboardManager.get_instance()
        try:
            assert await LeaderboardManager.get_instance() is first
        finally:
            LeaderboardManager._instance = None

    async def test_ping_false_when_redis_unreachable(self):
        manager = await LeaderboardManager.get_instance()
        manager.connection = MagicMock()
        manager.connection.initialize = AsyncMock(side_effect=BackendUnavailable('refused'))
        manager.connection.close = AsyncMock()

        try:
            assert await manager.ping() is False
        finally:
            LeaderboardManager._instance = None


@pytest.mark.asyncio
class TestRedisConnection:
    async def test_ping_before_initialize(self):
        assert await RedisConnection().ping() is False

    async def test_ping_answers(self):
        connection = RedisConnection()
        connection.client = AsyncMock()
        connection.client.ping.return_value = True
        connection._initialized = True

        assert await connection.ping() is True

    async def test_ping_error_is_down(self):
        connection = RedisConnection()
        connection.client = AsyncMock()
        connection.client.ping.side_effect = redis.ConnectionError('refused')
        connection._initialized = True

        assert await connection.ping() is False
