import argparse
import logging

from .db import engine
from .db_init import init_db, drop_db
from .utils.config import LOG_LEVEL
from .utils.db_tools import with_db
from .utils.logging_config import setup_logging
from .utils.seed import seed_database

logger = logging.getLogger(__name__)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Seed the game reviews database with demo data.")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible data")
    parser.add_argument("--users", type=int, default=10)
    parser.add_argument("--games", type=int, default=50)
    args = parser.parse_args(argv)

    setup_logging(LOG_LEVEL)

    if args.reset:
        drop_db(engine)
    init_db(engine)

    with with_db() as db:
        seed_database(db, users=args.users, games=args.games, seed=args.seed)


if __name__ == "__main__":
    main()
