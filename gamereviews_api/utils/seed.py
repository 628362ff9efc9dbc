import logging
import random
from typing import Optional

from faker import Faker
from sqlalchemy.orm import Session

from ..models.game import Game
from ..models.review import Review
from ..models.user import User

logger = logging.getLogger(__name__)

GENRES = [
    "Action", "Adventure", "Fighting", "Platform", "Puzzle", "Racing",
    "Role-playing", "Shooter", "Simulator", "Sport", "Strategy",
]

PLATFORMS = [
    "Nintendo Switch", "PlayStation 5", "PlayStation 4", "Xbox Series X",
    "Xbox One", "PC", "Nintendo 64", "Game Boy Advance", "Sega Genesis",
]

TITLE_SUFFIXES = [
    "Quest", "Legends", "Kart", "Odyssey", "Chronicles", "Tactics",
    "Rising", "Unleashed", "Party", "Saga",
]


def fake_game_title(fake: Faker) -> str:
    return f"{fake.word().capitalize()} {fake.random_element(TITLE_SUFFIXES)}"


def seed_database(
        session: Session,
        users: int = 10,
        games: int = 50,
        min_reviews: int = 1,
        max_reviews: int = 5,
        seed: Optional[int] = None,
) -> dict:
    """
    Fill the store with demo data: users with fake names, games with random
    genre/platform/price, and between min_reviews and max_reviews reviews per
    game, each written by a randomly picked existing user.

    Returns counts of what was created.
    """
    if users < 1:
        raise ValueError("At least one user is required to write reviews")
    if min_reviews < 0 or max_reviews < min_reviews:
        raise ValueError("Invalid review range")

    fake = Faker()
    rng = random.Random(seed)
    if seed is not None:
        fake.seed_instance(seed)

    logger.info("Seeding data...")

    created_users = [User(name=fake.name()) for _ in range(users)]
    session.add_all(created_users)
    session.flush()

    review_count = 0
    for _ in range(games):
        game = Game(
            title=fake_game_title(fake),
            genre=rng.choice(GENRES),
            platform=rng.choice(PLATFORMS),
            price=rng.randint(0, 60),
        )
        session.add(game)
        session.flush()

        for _ in range(rng.randint(min_reviews, max_reviews)):
            user = rng.choice(created_users)
            session.add(Review(
                score=rng.randint(1, 10),
                comment=fake.sentence(),
                game_id=game.id,
                user_id=user.id,
            ))
            review_count += 1

    session.commit()

    result = {"users": users, "games": games, "reviews": review_count}
    logger.info("Done seeding: %s", result)
    return result
