from sqlalchemy import Column, Integer, String, ForeignKey
from ..models import Base


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    score = Column(Integer, nullable=True)
    comment = Column(String, nullable=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    def __repr__(self):
        return f"<Review(id={self.id}, score={self.score}, game_id={self.game_id}, user_id={self.user_id})>"
