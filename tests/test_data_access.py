import logging
import pytest
from sqlalchemy.exc import IntegrityError

from gamereviews_api.models.review import Review
from gamereviews_api.utils.game import (
    create_game,
    get_game,
    list_games,
    list_users_for_game,
    list_games_for_user,
)
from gamereviews_api.utils.review import (
    ReferenceNotFoundError,
    count_reviews,
    create_review,
    delete_review,
    get_review,
    list_reviews_for_game,
    list_reviews_for_user,
    update_review,
)
from gamereviews_api.utils.user import create_user, get_user, list_users


def test_game_columns(db, mario_kart):
    game = get_game(db, mario_kart["game"].id)
    assert game.title == "Mario Kart"
    assert game.platform == "Switch"
    assert game.genre == "Racing"
    assert game.price == 60


def test_get_missing_game_returns_none(db):
    assert get_game(db, 12345) is None


def test_list_games_respects_limit(db):
    for i in range(5):
        create_game(db, title=f"Title {i}", price=1)
    assert [g.title for g in list_games(db, limit=3)] == ["Title 0", "Title 1", "Title 2"]


def test_reviews_for_game(db, mario_kart):
    rows = list_reviews_for_game(db, mario_kart["game"].id)
    assert [(r.comment, u.name) for r, u in rows] == [
        ("A classic", "Liza"),
        ("Wow what a game", "Duane"),
    ]


def test_users_for_game_are_distinct(db, mario_kart):
    game_id = mario_kart["game"].id
    create_review(db, score=6, comment="Second look", game_id=game_id, user_id=mario_kart["liza"].id)

    users = list_users_for_game(db, game_id)
    assert [u.name for u in users] == ["Liza", "Duane"]


def test_games_and_reviews_for_user(db, mario_kart):
    other = create_game(db, title="Zelda", genre="Adventure", platform="Switch", price=50)
    create_review(db, score=10, comment="Masterpiece", game_id=other.id, user_id=mario_kart["liza"].id)

    liza_id = mario_kart["liza"].id
    assert [g.title for g in list_games_for_user(db, liza_id)] == ["Mario Kart", "Zelda"]
    assert [r.comment for r in list_reviews_for_user(db, liza_id)] == ["A classic", "Masterpiece"]
    assert [r.comment for r in list_reviews_for_user(db, mario_kart["duane"].id)] == ["Wow what a game"]


def test_users(db, mario_kart):
    assert get_user(db, mario_kart["duane"].id).name == "Duane"
    assert get_user(db, 4242) is None
    assert [u.name for u in list_users(db)] == ["Liza", "Duane"]


def test_create_review_rejects_missing_references(db, mario_kart):
    with pytest.raises(ReferenceNotFoundError):
        create_review(db, score=1, comment="x", game_id=777, user_id=mario_kart["liza"].id)
    with pytest.raises(ReferenceNotFoundError):
        create_review(db, score=1, comment="x", game_id=mario_kart["game"].id, user_id=777)
    assert count_reviews(db) == 2


def test_store_enforces_foreign_keys(db, mario_kart):
    db.add(Review(score=1, comment="orphan", game_id=777, user_id=mario_kart["liza"].id))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
    assert count_reviews(db) == 2


def test_store_rejects_negative_price(db):
    with pytest.raises(IntegrityError):
        create_game(db, title="Refund", price=-1)
    db.rollback()


def test_update_review_keeps_references(db, mario_kart):
    review = mario_kart["reviews"][1]
    updated = update_review(db, review.id, score=4, comment="Meh")
    assert (updated.score, updated.comment) == (4, "Meh")
    assert updated.game_id == mario_kart["game"].id
    assert updated.user_id == mario_kart["duane"].id


def test_update_missing_review_returns_none(db):
    assert update_review(db, 999, score=1, comment="x") is None


def test_delete_review_returns_snapshot(db, mario_kart):
    review_id = mario_kart["reviews"][0].id
    deleted = delete_review(db, review_id)
    assert deleted.id == review_id
    assert deleted.comment == "A classic"
    assert get_review(db, review_id) is None
    assert delete_review(db, review_id) is None


def test_write_logs_use_lazy_arguments(db, mario_kart, caplog):
    caplog.set_level(logging.INFO, logger="gamereviews_api.utils.review")
    review_id = mario_kart["reviews"][0].id
    update_review(db, review_id, score=2, comment="Logged")

    records = [r for r in caplog.records if r.name == "gamereviews_api.utils.review"]
    assert records
    assert records[-1].msg == "Updated review %s"
    assert records[-1].args == (review_id,)
