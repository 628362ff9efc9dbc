import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.game import Game
from ..models.review import Review
from ..models.user import User

logger = logging.getLogger(__name__)


class ReferenceNotFoundError(ValueError):
    """
    Raised when a review points at a game or user that does not exist.
    """


def get_review(session: Session, review_id: int) -> Optional[Review]:
    review = session.query(Review).filter_by(id=review_id).first()
    if not review:
        logger.debug("Review %s not found", review_id)
    return review


def count_reviews(session: Session) -> int:
    return session.query(Review).count()


def create_review(session: Session, score: Optional[int], comment: Optional[str],
                  game_id: int, user_id: int) -> Review:
    """
    Insert a review for an existing game and user.

    Raises:
        ReferenceNotFoundError -> game_id or user_id does not exist.
        IntegrityError -> the store rejected the row (session is rolled back).
    """
    if session.query(Game.id).filter_by(id=game_id).first() is None:
        raise ReferenceNotFoundError(f"Game {game_id} does not exist")
    if session.query(User.id).filter_by(id=user_id).first() is None:
        raise ReferenceNotFoundError(f"User {user_id} does not exist")

    review = Review(score=score, comment=comment, game_id=game_id, user_id=user_id)
    session.add(review)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    session.refresh(review)
    logger.info("Created review %s for game %s by user %s", review.id, game_id, user_id)
    return review


def update_review(session: Session, review_id: int, score: Optional[int],
                  comment: Optional[str]) -> Optional[Review]:
    """
    Overwrite score and comment. Returns None if the review does not exist.
    """
    review = get_review(session, review_id)
    if not review:
        return None

    review.score = score
    review.comment = comment
    session.commit()
    session.refresh(review)
    logger.info("Updated review %s", review_id)
    return review


def delete_review(session: Session, review_id: int) -> Optional[Review]:
    """
    Delete a review and return it as it was before deletion, or None if absent.
    The returned instance is detached but keeps its loaded attributes.
    """
    review = get_review(session, review_id)
    if not review:
        return None

    session.delete(review)
    session.commit()
    logger.info("Deleted review %s", review_id)
    return review


def list_reviews_for_game(session: Session, game_id: int) -> List[Tuple[Review, User]]:
    """
    Reviews of a game paired with their authors, in insertion order.
    """
    rows = (
        session.query(Review, User)
        .join(User, Review.user_id == User.id)
        .filter(Review.game_id == game_id)
        .order_by(Review.id)
        .all()
    )
    return [(r[0], r[1]) for r in rows]


def list_reviews_for_user(session: Session, user_id: int) -> List[Review]:
    return session.query(Review).filter_by(user_id=user_id).order_by(Review.id).all()
