from pydantic import BaseModel
from typing import List, Literal, Optional

from .request import UserInfo

class MemberResponse(BaseModel):
    user_id: str
    score: int
    rank: int
    info: Optional[UserInfo] = None

class LeadersResponse(BaseModel):
    event_type: str
    page: int
    page_size: int
    total_pages: int
    entries: List[MemberResponse]

class StatsResponse(BaseModel):
    event_type: str
    total_members: int
    total_pages: int
    page_size: int

class RemoveResponse(BaseModel):
    status: Literal["removed"] = "removed"
    user_id: str

class HealthResponse(BaseModel):
    status: Literal["healthy", "unhealthy"] = "healthy"
    redis: Literal["up", "down"]
    uptime: float
