from .interfaces import MetadataStore, OrderedScoreStore
from .memory import MemoryMetadataStore, MemoryScoreStore
from .redis_store import RedisMetadataStore, RedisScoreStore

__all__ = [
    'MetadataStore',
    'OrderedScoreStore',
    'MemoryMetadataStore',
    'MemoryScoreStore',
    'RedisMetadataStore',
    'RedisScoreStore',
]
