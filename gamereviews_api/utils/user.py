import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.user import User

logger = logging.getLogger(__name__)


def create_user(session: Session, name: str) -> User:
    user = User(name=name)
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.name)
    return user


def get_user(session: Session, user_id: int) -> Optional[User]:
    return session.query(User).filter_by(id=user_id).first()


def list_users(session: Session) -> List[User]:
    return session.query(User).order_by(User.id).all()
