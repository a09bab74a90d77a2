"""Database connection handling."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Configs
from .entities import Base


class Database:
    """An engine plus a session factory for one database."""

    def __init__(self, url):
        parsed = make_url(url)
        options = {}
        if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
            # One shared connection so every session sees the same in-memory data.
            options = {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
        self.engine = create_engine(parsed, **options)
        self._sessions = sessionmaker(self.engine, expire_on_commit=False)

    @classmethod
    def from_configs(cls, configs: Configs) -> "Database":
        """Connect using the configured data source and migrate the schema."""
        database = cls(configs.database.data_source)
        database.migrate()
        return database

    def migrate(self) -> None:
        """Create any missing tables."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session, committing on success and rolling back on error."""
        with self._sessions() as session, session.begin():
            yield session

    def close(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()