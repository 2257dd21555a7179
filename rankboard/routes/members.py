from fastapi import APIRouter, Depends, HTTPException, Path, Query

from ..core.leaderboard import Leaderboard
from ..errors import LeaderboardError
from ..logger import get_logger
from ..models.request import IncrementRequest, MemberRequest, UserInfo
from ..models.response import MemberResponse, RemoveResponse
from .dependencies import decode_info, encode_info, get_leaderboard, http_error, member_response

logger = get_logger(__name__)
router = APIRouter(prefix="/leaderboards/{event_type}/members")

@router.post("", response_model=MemberResponse, status_code=201)
async def first_or_insert(data: MemberRequest, board: Leaderboard = Depends(get_leaderboard)):
    """
    Add a member to the leaderboard unless it is already there.

    - **user_id**: Unique identifier for the member
    - **score**: Starting score, ignored when the member already exists
    """
    try:
        user = await board.first_or_insert(data.user_id, data.score)
        return member_response(user)
    except LeaderboardError as e:
        logger.error(f"Error inserting {data.user_id} into {board.name}: {e}")
        raise http_error(e)

@router.get("/{user_id}", response_model=MemberResponse)
async def get_member(
    user_id: str = Path(..., min_length=1, max_length=100),
    with_info: bool = Query(False, description="Include stored member info"),
    board: Leaderboard = Depends(get_leaderboard)
):
    """
    Get score and rank for a member. Unranked members have rank 0.
    """
    try:
        user = await board.get_member(user_id, with_metadata=with_info)
        return member_response(user)
    except LeaderboardError as e:
        logger.error(f"Error getting {user_id} from {board.name}: {e}")
        raise http_error(e)

@router.post("/{user_id}/increment", response_model=MemberResponse)
async def increment_score(
    data: IncrementRequest,
    user_id: str = Path(..., min_length=1, max_length=100),
    board: Leaderboard = Depends(get_leaderboard)
):
    """
    Add a positive delta to a member's score.

    - **delta**: Positive amount to add
    """
    try:
        user = await board.increment_member_score(user_id, data.delta)
        return member_response(user)
    except LeaderboardError as e:
        logger.warning(f"Increment of {user_id} in {board.name} rejected: {e}")
        raise http_error(e)

@router.delete("/{user_id}", response_model=RemoveResponse)
async def remove_member(
    user_id: str = Path(..., min_length=1, max_length=100),
    board: Leaderboard = Depends(get_leaderboard)
):
    """Remove a member's score. Stored info is kept."""
    try:
        removed = await board.remove_member(user_id)
    except LeaderboardError as e:
        logger.error(f"Error removing {user_id} from {board.name}: {e}")
        raise http_error(e)
    if not removed:
        raise HTTPException(status_code=404, detail="User not found in leaderboard")
    return RemoveResponse(user_id=user_id)

@router.put("/{user_id}/info", response_model=UserInfo)
async def upsert_info(
    info: UserInfo,
    user_id: str = Path(..., min_length=1, max_length=100),
    board: Leaderboard = Depends(get_leaderboard)
):
    """Store profile info for a member, replacing any previous value"""
    if info.user_id != user_id:
        raise HTTPException(status_code=400, detail="user_id in body does not match path")
    try:
        await board.upsert_member_info(user_id, encode_info(info))
        return info
    except LeaderboardError as e:
        logger.error(f"Error storing info for {user_id}: {e}")
        raise http_error(e)

@router.get("/{user_id}/info", response_model=UserInfo)
async def get_info(
    user_id: str = Path(..., min_length=1, max_length=100),
    board: Leaderboard = Depends(get_leaderboard)
):
    """Get stored profile info for a member"""
    try:
        payload = await board.get_member_info(user_id)
    except LeaderboardError as e:
        logger.warning(f"Info for {user_id} unavailable: {e}")
        raise http_error(e)
    return decode_info(payload)
