from sqlalchemy import Column, Integer, String, Float, CheckConstraint
from ..models import Base


class Game(Base):
    __tablename__ = "games"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_games_price_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False, index=True)
    genre = Column(String, nullable=True)
    platform = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0)

    def __repr__(self):
        return f"<Game(id={self.id}, title={self.title}, platform={self.platform})>"
