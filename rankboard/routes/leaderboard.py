from fastapi import APIRouter, Depends, Query

from ..core import paging
from ..core.leaderboard import Leaderboard
from ..errors import LeaderboardError
from ..logger import get_logger
from ..models.response import LeadersResponse, StatsResponse
from .dependencies import get_leaderboard, http_error, member_response

logger = get_logger(__name__)
router = APIRouter(prefix="/leaderboards/{event_type}")

@router.get("/leaders", response_model=LeadersResponse)
async def get_leaders(
    event_type: str,
    page: int = Query(1, description="1-based page; out of range pages are clamped"),
    board: Leaderboard = Depends(get_leaderboard)
):
    """
    Get one page of leaders, highest score first.

    - **event_type**: Leaderboard name
    - **page**: Page number
    """
    try:
        logger.info(f"Getting leaders page {page} for {board.name}")
        result = await board.get_leaders_page(page)
        response = LeadersResponse(
            event_type=event_type,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            entries=[member_response(user) for user in result.entries]
        )
        logger.info(f"Successfully retrieved {len(result.entries)} leaders")
        return response
    except LeaderboardError as e:
        logger.error(f"Error getting leaders: {e}")
        raise http_error(e)

@router.get("/stats", response_model=StatsResponse)
async def get_stats(event_type: str, board: Leaderboard = Depends(get_leaderboard)):
    """Member and page counts for a leaderboard"""
    try:
        members = await board.total_members()
        return StatsResponse(
            event_type=event_type,
            total_members=members,
            total_pages=paging.total_pages(members, board.page_size),
            page_size=board.page_size
        )
    except LeaderboardError as e:
        logger.error(f"Error getting stats for {board.name}: {e}")
        raise http_error(e)
