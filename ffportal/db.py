"""Database connection and initialization"""

import logging
import os
from typing import Any, Generator

from fastapi import Depends
from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ffportal.config import Config, get_config
from ffportal.models.base import BaseModel
from ffportal.seeding import seed_admin_user, seed_demo_catalog

# import models so they are registered in the metadata before create_all
from ffportal.models import credit_card, program, transfer_ratio, user  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseConnection:
    engine: Engine
    session_local: sessionmaker[Session]
    # Class-level caches ensure one engine and one bootstrap per database URL.
    _engines: dict[str, Engine] = {}
    _bootstrapped: set[str] = set()

    def __init__(self, config: Config = Depends(get_config)) -> None:
        self.config = config
        url = config.database_url
        if url not in self.__class__._engines:
            connect_args = {}
            if url.startswith("sqlite"):
                # Ensure the database folder exists.
                os.makedirs(config.database_path.parent, exist_ok=True)
                connect_args = {"check_same_thread": False}
            self.__class__._engines[url] = create_engine(
                url, connect_args=connect_args
            )
        self.engine = self.__class__._engines[url]
        self.session_local = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )
        if url not in self.__class__._bootstrapped:
            self.create_tables()
            self.seed_bootstrap_data()
            self.__class__._bootstrapped.add(url)

    @classmethod
    def dispose(cls, database_url: str) -> None:
        """Forget the engine of a database, next connection bootstraps it again."""
        engine = cls._engines.pop(database_url, None)
        if engine is not None:
            engine.dispose()
        cls._bootstrapped.discard(database_url)

    def create_tables(self) -> None:
        """Create all database tables defined in models."""
        logger.info("Creating database tables...")
        BaseModel.metadata.create_all(bind=self.engine)
        logger.info("Database tables created.")

    def get_session(self) -> Session:
        """Return a new SQLAlchemy session."""
        return self.session_local()

    def seed_bootstrap_data(self) -> None:
        """
        Create the administrator account and, when enabled, the demo catalogue.
        Existing rows are never touched, so this is safe to run on every start.
        """
        with self.get_session() as session:
            try:
                seed_admin_user(session, self.config)
                if self.config.seed_demo_data:
                    seed_demo_catalog(session)
                session.commit()
                logger.info("Bootstrap data seeding completed successfully.")
            except SQLAlchemyError:
                session.rollback()
                logger.exception("Error occurred during bootstrap data seeding.")
                raise


def get_db(db_conn: DatabaseConnection = Depends()) -> Generator[Session, Any, None]:
    """
    Dependency for providing a SQLAlchemy session to services and tests.

    Yields:
        SQLAlchemy Session.
    """
    session = db_conn.get_session()
    try:
        yield session
    finally:
        session.close()
