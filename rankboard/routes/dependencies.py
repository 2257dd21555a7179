from typing import Optional
import orjson
from fastapi import HTTPException, Path
from pydantic import ValidationError

from ..core.leaderboard import Leaderboard
from ..database.base import LeaderboardManager
from ..errors import BackendUnavailable, InvalidIncrement, InvalidScore, LeaderboardError, NotFound
from ..logger import get_logger
from ..models.data import User
from ..models.request import UserInfo
from ..models.response import MemberResponse

logger = get_logger(__name__)

async def get_leaderboard(event_type: str = Path(..., min_length=1, max_length=100)) -> Leaderboard:
    """Leaderboard for the event type in the request path"""
    try:
        manager = await LeaderboardManager.get_instance()
        return await manager.get_leaderboard(event_type)
    except LeaderboardError as e:
        raise http_error(e)

def http_error(e: LeaderboardError) -> HTTPException:
    """Map a rankboard error onto the HTTP status callers should see"""
    if isinstance(e, NotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, (InvalidIncrement, InvalidScore)):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, BackendUnavailable):
        return HTTPException(status_code=503, detail="Service temporarily unavailable")
    # BackendError and anything unexpected
    return HTTPException(status_code=500, detail="Internal server error")

def encode_info(info: UserInfo) -> bytes:
    return orjson.dumps(info.model_dump())

def decode_info(payload: bytes) -> UserInfo:
    try:
        return UserInfo(**orjson.loads(payload))
    except (orjson.JSONDecodeError, TypeError, ValidationError) as e:
        logger.error(f"Stored member info could not be decoded: {e}")
        raise HTTPException(status_code=500, detail="Stored member info is not valid")

def member_response(user: User) -> MemberResponse:
    info: Optional[UserInfo] = None
    if user.metadata is not None:
        info = decode_info(user.metadata)
    return MemberResponse(user_id=user.id, score=user.score, rank=user.rank, info=info)

async def get_manager() -> LeaderboardManager:
    return await LeaderboardManager.get_instance()
