"""
SQLAlchemy engine wrapper shared by the whole process.

One ``Database`` is created in the application lifespan, stored on
``app.state`` and handed to the route functions through ``get_db``.
"""

from typing import Any, Dict, List, Optional

from fastapi import Request
from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from messageboard.errors import DataAccessError

Base = declarative_base()


class Database:
    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)

        engine_kwargs: Dict[str, Any] = {"echo": echo}
        if self.url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # in-memory databases live and die with a single connection
            if self.url.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False
        )

    @property
    def display_url(self) -> str:
        return self.url.render_as_string(hide_password=True)

    def query(
        self, sql: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Run a parameterized read and return its rows as plain dicts.

        Raises:
            DataAccessError: the driver or the database rejected the query
        """
        logger.debug(f"query: {sql} params={params}")
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text(sql), params or {})
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as exc:
            logger.exception(f"query failed: {sql}")
            raise DataAccessError(str(exc)) from exc

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        from messageboard import models  # noqa: F401  (registers the tables)

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Database:
    return request.app.state.database
