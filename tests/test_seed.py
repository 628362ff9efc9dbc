import pytest
from collections import Counter

from gamereviews_api.models.game import Game
from gamereviews_api.models.review import Review
from gamereviews_api.models.user import User
from gamereviews_api.utils.seed import seed_database, GENRES, PLATFORMS


def test_seed_default_counts(db):
    result = seed_database(db, seed=1234)

    assert db.query(User).count() == 10
    assert db.query(Game).count() == 50
    assert db.query(Review).count() == result["reviews"]
    assert result["users"] == 10
    assert result["games"] == 50


def test_seed_reviews_per_game(db):
    seed_database(db, seed=7)

    per_game = Counter(game_id for (game_id,) in db.query(Review.game_id).all())
    game_ids = {game_id for (game_id,) in db.query(Game.id).all()}
    assert set(per_game) == game_ids
    assert all(1 <= n <= 5 for n in per_game.values())


def test_seed_field_ranges(db):
    seed_database(db, users=3, games=20, seed=99)

    user_ids = {user_id for (user_id,) in db.query(User.id).all()}
    for game in db.query(Game).all():
        assert game.title
        assert game.genre in GENRES
        assert game.platform in PLATFORMS
        assert 0 <= game.price <= 60
    for review in db.query(Review).all():
        assert 1 <= review.score <= 10
        assert review.comment
        assert review.user_id in user_ids


def test_seed_is_reproducible(session_factory):
    first = session_factory()
    try:
        seed_database(first, users=2, games=5, seed=42)
        snapshot = [(g.title, g.genre, g.platform, g.price) for g in first.query(Game).order_by(Game.id)]
        first.query(Review).delete()
        first.query(Game).delete()
        first.query(User).delete()
        first.commit()

        seed_database(first, users=2, games=5, seed=42)
        again = [(g.title, g.genre, g.platform, g.price) for g in first.query(Game).order_by(Game.id)]
    finally:
        first.close()

    assert snapshot == again


def test_seed_requires_a_user(db):
    with pytest.raises(ValueError):
        seed_database(db, users=0)
