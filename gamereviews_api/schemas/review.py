from typing import Optional
from pydantic import BaseModel, Field
from .user import UserName

# Largest value a signed 64-bit INTEGER column accepts.
MAX_DB_INT = 2**63 - 1
MIN_DB_INT = -(2**63)


class Review(BaseModel):
    id: int
    score: Optional[int]
    comment: Optional[str]
    game_id: int
    user_id: int

    class Config:
        from_attributes = True


class ReviewCreate(BaseModel):
    score: int = Field(ge=MIN_DB_INT, le=MAX_DB_INT)
    comment: str
    game_id: int = Field(ge=1, le=MAX_DB_INT)
    user_id: int = Field(ge=1, le=MAX_DB_INT)


class ReviewUpdate(BaseModel):
    """
    Full overwrite of the mutable review fields. game_id and user_id are fixed at creation.
    """
    score: int = Field(ge=MIN_DB_INT, le=MAX_DB_INT)
    comment: str


class ReviewDetail(BaseModel):
    comment: Optional[str]
    score: Optional[int]
    user: UserName

    class Config:
        from_attributes = True
