import asyncio
import redis
from redis.asyncio import Redis

from ..config import redis_config
from ..errors import BackendUnavailable
from ..logger import get_logger

logger = get_logger(__name__)

class RedisConnection:
    def __init__(self, config=redis_config):
        self.config = config
        self.client = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Open the Redis client and check the server answers"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                self.client = Redis(
                    host=self.config.HOST,
                    port=self.config.PORT,
                    password=self.config.PASSWORD,
                    db=self.config.DB,
                    decode_responses=False,
                    socket_timeout=self.config.SOCKET_TIMEOUT,
                    socket_connect_timeout=self.config.CONNECT_TIMEOUT
                )
                await self.client.ping()
                self._initialized = True
                logger.info(f"Redis connection initialized at {self.config.HOST}:{self.config.PORT}/{self.config.DB}")
            except redis.RedisError as e:
                logger.error(f"Failed to initialize Redis connection: {e}")
                await self.close()
                raise BackendUnavailable(f"Redis at {self.config.HOST}:{self.config.PORT} is unreachable: {e}") from e

    async def close(self):
        """Close the Redis client"""
        if self.client:
            await self.client.aclose()
        self.client = None
        self._initialized = False

    async def ping(self) -> bool:
        """True when the client is open and Redis answers PING"""
        if not self._initialized:
            return False
        try:
            return bool(await self.client.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    @property
    def initialized(self) -> bool:
        return self._initialized
