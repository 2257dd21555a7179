import time
from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from ..database.base import LeaderboardManager
from ..logger import get_logger
from ..models.response import HealthResponse
from .dependencies import get_manager

logger = get_logger(__name__)
router = APIRouter()

start_time = time.time()

@router.get("/health", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
@router.head("/health")
async def health_check(manager: LeaderboardManager = Depends(get_manager)):
    """Service uptime and Redis reachability; 503 while Redis is down"""
    uptime = time.time() - start_time
    if await manager.ping():
        return HealthResponse(redis="up", uptime=uptime)

    logger.warning("Health check failed: Redis is not answering")
    response = HealthResponse(status="unhealthy", redis="down", uptime=uptime)
    return ORJSONResponse(status_code=503, content=response.model_dump())
