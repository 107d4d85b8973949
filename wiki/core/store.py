from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine, select

from wiki.core.errors import ConstraintViolation, NotFound, StorageError
from wiki.models import Page

logger = logging.getLogger("wiki.store")


class PageStore:
    """Single-table persistence for wiki pages.

    Holds the process-wide engine (and so the connection pool). Every
    operation checks out a session for its own duration only.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str, pool_size: int = 5) -> "PageStore":
        connect_args = {}
        if url.startswith("sqlite"):
            # sessions are used from FastAPI's worker threads
            connect_args["check_same_thread"] = False
        engine = create_engine(url, pool_size=pool_size, connect_args=connect_args)
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        try:
            with Session(self.engine) as session:
                yield session
        except IntegrityError as e:
            raise ConstraintViolation(f"constraint violated: {e.orig}") from e
        except SQLAlchemyError as e:
            raise StorageError(f"storage failure: {e}") from e

    def ensure_schema(self) -> None:
        url = self.engine.url
        try:
            if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
            SQLModel.metadata.create_all(self.engine)
        except (OSError, SQLAlchemyError) as e:
            logger.error("Database preparation error: %s", e)
            raise StorageError(f"schema preparation failed: {e}") from e
        logger.info("Schema ready at %s", url.render_as_string(hide_password=True))

    def list_names(self) -> list[str]:
        with self.session() as session:
            names = session.exec(select(Page.name)).all()
        return sorted(names)

    def get_by_name(self, name: str) -> Page | None:
        with self.session() as session:
            return session.exec(select(Page).where(Page.name == name)).first()

    def insert(self, name: str, content: str) -> int:
        with self.session() as session:
            page = Page(name=name, content=content)
            session.add(page)
            session.commit()
            session.refresh(page)
            logger.info("Created page %r (id=%s)", name, page.id)
            return page.id

    def update_by_id(self, id: int, content: str) -> None:
        with self.session() as session:
            page = session.get(Page, id)
            if page is None:
                raise NotFound(f"no page with id {id}")
            page.content = content
            session.add(page)
            session.commit()
            logger.info("Updated page %r (id=%s)", page.name, id)

    def delete_by_id(self, id: int) -> None:
        with self.session() as session:
            page = session.get(Page, id)
            if page is None:
                return
            session.delete(page)
            session.commit()
            logger.info("Deleted page id=%s", id)

    def ping(self) -> None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StorageError(f"database unreachable: {e}") from e

    def close(self) -> None:
        self.engine.dispose()

