from sqlalchemy.orm import Session

from ..models.game import Game
from ..schemas.game import GameDetail
from ..schemas.review import ReviewDetail
from ..schemas.user import UserName
from .review import list_reviews_for_game


def build_game_detail(session: Session, game: Game) -> GameDetail:
    """
    Assemble the nested single-game view.

    Only the fields declared on GameDetail, ReviewDetail and UserName make it
    into the response; everything else on the rows is dropped here.
    """
    reviews = [
        ReviewDetail(
            comment=review.comment,
            score=review.score,
            user=UserName(name=user.name),
        )
        for review, user in list_reviews_for_game(session, game.id)
    ]
    return GameDetail(
        id=game.id,
        title=game.title,
        genre=game.genre,
        price=game.price,
        reviews=reviews,
    )
