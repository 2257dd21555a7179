from pydantic import BaseModel, Field, field_validator

class MemberRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=100)
    score: int

    @field_validator('user_id')
    @classmethod
    def validate_id(cls, v):
        if not v.strip():
            raise ValueError('ID cannot be empty or whitespace')
        return v.strip()

class IncrementRequest(BaseModel):
    # positivity is checked by the leaderboard so the error is the domain one
    delta: int

class UserInfo(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=100)
    user_name: str = ''
    user_avatar: str = ''
