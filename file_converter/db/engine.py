"""SQLAlchemy engine setup for the SQLModel storage backend."""

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine
from sqlalchemy.engine import Engine

# registers the tables on SQLModel.metadata
from file_converter.db import tables  # noqa: F401


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite URLs get thread-sharing connect args.

    In-memory SQLite (``sqlite://``) uses a single shared connection so every
    session sees the same database.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, echo=echo, **kwargs)


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
