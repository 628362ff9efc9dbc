import logging

from sqlalchemy.engine import Engine

from .models import Base

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    """Create any missing tables for users, games and reviews."""
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ensured on %s", bind.url.render_as_string(hide_password=True))


def drop_db(bind: Engine) -> None:
    Base.metadata.drop_all(bind=bind)
    logger.warning("Dropped all tables on %s", bind.url.render_as_string(hide_password=True))
