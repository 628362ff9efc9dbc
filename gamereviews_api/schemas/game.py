from typing import Optional, List, Union
from pydantic import BaseModel, Field, field_serializer
from .review import ReviewDetail


def _render_price(price: float) -> Union[int, float]:
    # whole prices go out as 60, not 60.0
    return int(price) if float(price).is_integer() else price


class Game(BaseModel):
    id: int
    title: str
    genre: Optional[str]
    platform: Optional[str]
    price: float

    class Config:
        from_attributes = True

    @field_serializer("price")
    def serialize_price(self, price: float):
        return _render_price(price)


class GameDetail(BaseModel):
    """
    Single game view: platform is left out, reviews carry their author's name.
    """
    id: int
    title: str
    genre: Optional[str]
    price: float
    reviews: List[ReviewDetail] = Field(default_factory=list)

    class Config:
        from_attributes = True

    @field_serializer("price")
    def serialize_price(self, price: float):
        return _render_price(price)
