"""
Database engine and session management.
"""
from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import DEFAULT_APP_CONFIG
from .tables import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Manages the SQLAlchemy engine and sessions.
    """

    def __init__(self, database_url: str = DEFAULT_APP_CONFIG.database_url):
        self.url = make_url(database_url)
        engine_kwargs: dict = {}

        if self.url.get_backend_name() == "sqlite":
            # Sync handlers run in FastAPI's threadpool.
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                # One shared connection, otherwise every session sees an empty database.
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self) -> None:
        """Create any missing tables."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database initialized at %s", self.url.render_as_string(hide_password=True))

    def get_session(self) -> Session:
        return self.SessionLocal()


# Singleton instance
db_manager = DatabaseManager()
