import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.game import Game
from ..models.review import Review
from ..models.user import User
from .config import GAMES_LIST_LIMIT

logger = logging.getLogger(__name__)


def create_game(session: Session, title: str, genre: Optional[str] = None,
                platform: Optional[str] = None, price: float = 0) -> Game:
    game = Game(title=title, genre=genre, platform=platform, price=price)
    session.add(game)
    session.commit()
    session.refresh(game)
    logger.info("Created game %s (%s)", game.id, game.title)
    return game


def get_game(session: Session, game_id: int) -> Optional[Game]:
    game = session.query(Game).filter_by(id=game_id).first()
    if not game:
        logger.debug("Game %s not found", game_id)
    return game


def list_games(session: Session, limit: int = GAMES_LIST_LIMIT) -> List[Game]:
    """
    First `limit` games by title. Equal titles fall back to insertion order.
    """
    return (
        session.query(Game)
        .order_by(Game.title.asc(), Game.id.asc())
        .limit(limit)
        .all()
    )


def list_users_for_game(session: Session, game_id: int) -> List[User]:
    """
    Distinct users who reviewed the given game, ordered by user id.
    """
    return (
        session.query(User)
        .join(Review, Review.user_id == User.id)
        .filter(Review.game_id == game_id)
        .distinct()
        .order_by(User.id)
        .all()
    )


def list_games_for_user(session: Session, user_id: int) -> List[Game]:
    return (
        session.query(Game)
        .join(Review, Review.game_id == Game.id)
        .filter(Review.user_id == user_id)
        .distinct()
        .order_by(Game.id)
        .all()
    )
