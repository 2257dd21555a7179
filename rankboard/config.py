from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from .core.naming import Environment, parse_environment
from .core.paging import DEFAULT_PAGE_SIZE, resolve_page_size

class RedisConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='REDIS_')

    HOST: str = 'localhost'
    PORT: int = 6379
    PASSWORD: Optional[str] = None
    DB: int = 0
    SOCKET_TIMEOUT: float = 5.0
    CONNECT_TIMEOUT: float = 5.0

redis_config = RedisConfig()

class LeaderboardConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='LEADERBOARD_')

    APP_ID: str = 'rankboard'
    MODE: Environment = Environment.DEVELOPMENT
    # sizes outside the allowed set fall back to the default
    PAGE_SIZE: int = DEFAULT_PAGE_SIZE

    @field_validator('MODE', mode='before')
    @classmethod
    def validate_mode(cls, v):
        return parse_environment(v)

    @field_validator('PAGE_SIZE')
    @classmethod
    def validate_page_size(cls, v):
        return resolve_page_size(v)

leaderboard_config = LeaderboardConfig()

class LogConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='LOG_')

    LEVEL: str = 'INFO'

log_config = LogConfig()
