"""Shared fixtures: a fresh in-memory order store per test and an HTTP client bound to it."""

from collections.abc import AsyncIterator, Callable, Iterator
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from sample_api.app.core.db import build_engine, get_db, init_db
from sample_api.app.main import app
from sample_api.app.models.order import Order


@pytest.fixture
def engine() -> Iterator[Engine]:
    test_engine = build_engine("sqlite://")
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def add_order(db_session: Session) -> Callable[..., Order]:
    """Insert an order straight into the store, bypassing validation."""

    def _add(entry_date: datetime, name: str = "Order", description: str = "Description", **fields) -> Order:
        order = Order(entry_date=entry_date, name=name, description=description, **fields)
        db_session.add(order)
        db_session.commit()
        db_session.refresh(order)
        return order

    return _add


@pytest.fixture
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    async def _get_test_db() -> AsyncIterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()
