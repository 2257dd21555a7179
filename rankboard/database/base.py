import asyncio
from ..config import leaderboard_config
from ..core.leaderboard import Leaderboard
from ..core.naming import leaderboard_key, metadata_namespace
from ..errors import BackendUnavailable
from ..logger import get_logger
from .connection import RedisConnection
from .redis_store import RedisMetadataStore, RedisScoreStore

logger = get_logger(__name__)

class LeaderboardManager:
    _instance = None
    _lock = asyncio.Lock()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(LeaderboardManager, cls).__new__(cls)
            cls._instance.connection = RedisConnection()
            cls._instance.app_id = leaderboard_config.APP_ID
            cls._instance.mode = leaderboard_config.MODE
            cls._instance.page_size = leaderboard_config.PAGE_SIZE
            cls._instance._initialized = False
        return cls._instance

    @classmethod
    async def get_instance(cls):
        """Get the singleton instance of LeaderboardManager"""
        if cls._instance is None:
            async with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    async def initialize(self):
        """Connect to Redis"""
        if self._initialized:
            return

        try:
            await self.connection.initialize()
            self._initialized = True
            logger.info(f"Leaderboard manager initialized for {self.app_id} ({self.mode.value})")
        except Exception as e:
            logger.error(f"Failed to initialize leaderboard manager: {e}")
            await self.close()
            raise

    async def close(self):
        """Close the Redis connection"""
        if self.connection:
            await self.connection.close()
        self._initialized = False
        # Reset the singleton instance
        LeaderboardManager._instance = None

    async def ping(self) -> bool:
        """Connect if needed and report whether Redis answers"""
        if not self._initialized:
            try:
                await self.initialize()
            except BackendUnavailable:
                return False
        return await self.connection.ping()

    async def get_leaderboard(self, event_type: str) -> Leaderboard:
        """Build the leaderboard for an event type of this app and mode"""
        if not self._initialized:
            await self.initialize()

        client = self.connection.client
        key = leaderboard_key(self.app_id, event_type, self.mode)
        return Leaderboard(
            key,
            RedisScoreStore(client, key),
            RedisMetadataStore(client, metadata_namespace(self.app_id, self.mode)),
            page_size=self.page_size
        )
