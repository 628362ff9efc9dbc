import os
import sys
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gamereviews_api.main import app
from gamereviews_api.db import get_db
from gamereviews_api.db_init import init_db
from gamereviews_api.utils.game import create_game
from gamereviews_api.utils.user import create_user
from gamereviews_api.utils.review import create_review


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    yield factory
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def mario_kart(db):
    """
    One game with two reviews by two different users.
    """
    game = create_game(db, title="Mario Kart", platform="Switch", genre="Racing", price=60)
    liza = create_user(db, name="Liza")
    duane = create_user(db, name="Duane")
    first = create_review(db, score=8, comment="A classic", game_id=game.id, user_id=liza.id)
    second = create_review(db, score=10, comment="Wow what a game", game_id=game.id, user_id=duane.id)
    return {
        "game": game,
        "liza": liza,
        "duane": duane,
        "reviews": [first, second],
    }
