"""
Order store connection handling.

The service keeps its orders in a relational store accessed through
SQLAlchemy.  By default this is an in‑memory SQLite database; because
every new SQLite connection to ``sqlite://`` would open a fresh, empty
database, the engine is bound to a single shared connection through
``StaticPool``.  That one connection also serializes all reads and
writes issued by the service.

``init_db`` creates the tables on application start and ``get_db`` is
the FastAPI dependency handing a session to each request.
"""

from typing import AsyncIterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite URLs get ``check_same_thread`` disabled because FastAPI may
    resolve dependencies on a worker thread; in‑memory SQLite additionally
    shares one connection across the whole process.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)
    connect_args = {"check_same_thread": False}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Create all tables known to the ORM metadata if they are missing."""
    # Imported for its side effect of registering the table on ``Base``.
    from ..models import order  # noqa: F401

    Base.metadata.create_all(bind=bind)


async def get_db() -> AsyncIterator[Session]:
    """Yield a session for one request.

    Declared ``async`` so FastAPI opens and closes the session on the
    event loop, the same thread the ``async def`` routes query it from.
    With the shared in‑memory connection this keeps every use of it
    serialized; sync routes must not be added on top of this store.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
