from enum import Enum


class Environment(str, Enum):
    DEVELOPMENT = 'development'
    STAGING = 'staging'
    PRODUCTION = 'production'


ENVIRONMENTS = frozenset(e.value for e in Environment)


def is_valid_environment(value) -> bool:
    """Check a mode string (or Environment) against the known environments"""
    if isinstance(value, Environment):
        return True
    return value in ENVIRONMENTS


def parse_environment(value) -> Environment:
    """Return the Environment for a mode string, raising ValueError on unknown modes"""
    if isinstance(value, Environment):
        return value
    if not is_valid_environment(value):
        raise ValueError(f"{value!r} is not one of [{', '.join(sorted(ENVIRONMENTS))}]")
    return Environment(value)


def leaderboard_key(app_id: str, event_type: str, mode: Environment) -> str:
    """Sorted set key holding the scores of one event type"""
    return f"{app_id}-{event_type}-{parse_environment(mode).value}"


def metadata_namespace(app_id: str, mode: Environment) -> str:
    """Key prefix for member metadata, shared by every event type of an app"""
    return f"{app_id}-{parse_environment(mode).value}-users"
