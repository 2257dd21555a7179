import asyncio
from ..database.base import LeaderboardManager
from ..logger import get_logger

logger = get_logger(__name__)

async def startup_event():
    """Connect the leaderboard manager to Redis"""
    try:
        manager = await LeaderboardManager.get_instance()
        await manager.initialize()
        logger.info("Leaderboard manager initialized")
    except Exception as e:
        logger.error(f"Failed to initialize leaderboard manager: {e}")
        raise

async def shutdown_event():
    """Close the Redis connection"""
    try:
        async with asyncio.timeout(5.0):
            manager = await LeaderboardManager.get_instance()
            await manager.close()
            logger.info("Redis connection closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, Redis connection may still be open")
