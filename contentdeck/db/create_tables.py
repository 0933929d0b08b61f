"""Utility script to create the database schema."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all() -> None:
    """Create missing tables; existing ones are left untouched."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    from contentdeck.core.config import get_settings
    from contentdeck.core.logging import configure_logging

    configure_logging(get_settings().log_level)
    try:
        create_all()
        logger.info("Database table 'content' is ready.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
