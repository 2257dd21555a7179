from contextlib import contextmanager
from typing import List, Tuple
import redis
from redis.asyncio import Redis

from ..errors import BackendError, BackendUnavailable, MemberNotFound, MetadataNotFound
from ..logger import get_logger

logger = get_logger(__name__)

@contextmanager
def backend_errors(operation: str, key: str):
    """Re-raise Redis client failures as rankboard backend errors"""
    try:
        yield
    except (redis.ConnectionError, redis.TimeoutError) as e:
        logger.error(f"Redis unavailable during {operation} on {key}: {e}")
        raise BackendUnavailable(f"{operation} on {key} failed: {e}") from e
    except redis.RedisError as e:
        logger.error(f"Redis error during {operation} on {key}: {e}")
        raise BackendError(f"{operation} on {key} failed: {e}") from e

def _decode(value) -> str:
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return value

class RedisScoreStore:
    """Ordered score store backed by one Redis sorted set"""

    def __init__(self, client: Redis, key: str):
        self.client = client
        self.key = key

    @property
    def name(self) -> str:
        return self.key

    async def upsert(self, member_id: str, score: float) -> None:
        with backend_errors('ZADD', self.key):
            await self.client.zadd(self.key, {member_id: score})

    async def increment_by(self, member_id: str, delta: float) -> float:
        with backend_errors('ZINCRBY', self.key):
            return float(await self.client.zincrby(self.key, delta, member_id))

    async def rank(self, member_id: str) -> int:
        with backend_errors('ZREVRANK', self.key):
            rank = await self.client.zrevrank(self.key, member_id)
        if rank is None:
            raise MemberNotFound(member_id, self.key)
        return rank

    async def score(self, member_id: str) -> float:
        with backend_errors('ZSCORE', self.key):
            score = await self.client.zscore(self.key, member_id)
        if score is None:
            raise MemberNotFound(member_id, self.key)
        return float(score)

    async def count(self) -> int:
        with backend_errors('ZCARD', self.key):
            return await self.client.zcard(self.key)

    async def range_desc(self, start: int, end: int) -> List[Tuple[str, float]]:
        with backend_errors('ZREVRANGE', self.key):
            rows = await self.client.zrevrange(self.key, start, end, withscores=True)
        return [(_decode(member), float(score)) for member, score in rows]

    async def remove(self, member_id: str) -> bool:
        with backend_errors('ZREM', self.key):
            return await self.client.zrem(self.key, member_id) > 0

class RedisMetadataStore:
    """Opaque payloads stored as plain string keys under a namespace"""

    def __init__(self, client: Redis, namespace: str):
        self.client = client
        self.namespace = namespace

    def key_for(self, member_id: str) -> str:
        return f"{self.namespace}:{member_id}"

    async def put(self, member_id: str, payload: bytes) -> None:
        key = self.key_for(member_id)
        with backend_errors('SET', key):
            await self.client.set(key, payload)

    async def get(self, member_id: str) -> bytes:
        key = self.key_for(member_id)
        with backend_errors('GET', key):
            payload = await self.client.get(key)
        if payload is None:
            raise MetadataNotFound(member_id)
        if isinstance(payload, str):
            payload = payload.encode('utf-8')
        return payload
