"""Tests for OrderRepository against an in-memory SQLite store."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from sample_api.app.models.order import Order
from sample_api.app.repositories.order_repository import OrderRepository

NOW = datetime(2024, 1, 8, 12, 0, 0)


def test_add_assigns_identifier_and_defaults(db_session) -> None:
    repo = OrderRepository(db_session)

    order = repo.add(Order(entry_date=NOW, name="New Order", description="New Order Description"))

    assert order.id is not None
    assert order.is_invoiced is True
    assert order.is_deleted is False
    assert db_session.query(Order).count() == 1


def test_add_keeps_caller_supplied_identifier(db_session) -> None:
    repo = OrderRepository(db_session)

    order = repo.add(Order(id=42, entry_date=NOW, name="Order", description="Description"))

    assert order.id == 42


def test_add_duplicate_identifier_leaves_store_unchanged(db_session) -> None:
    repo = OrderRepository(db_session)
    repo.add(Order(id=1, entry_date=NOW, name="First", description="Description"))

    with pytest.raises(IntegrityError):
        repo.add(Order(id=1, entry_date=NOW, name="Second", description="Description"))

    names = [order.name for order in db_session.query(Order).all()]
    assert names == ["First"]


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


def test_list_recent_excludes_old_and_deleted_orders(db_session, add_order) -> None:
    add_order(NOW - timedelta(hours=2), name="Older Recent")
    add_order(NOW - timedelta(hours=1), name="Recent")
    add_order(NOW - timedelta(days=2), name="Old")
    add_order(NOW, name="Deleted", is_deleted=True)

    orders = OrderRepository(db_session).list_recent(NOW - timedelta(hours=24))

    assert [order.name for order in orders] == ["Recent", "Older Recent"]


def test_list_recent_breaks_ties_by_identifier(db_session, add_order) -> None:
    add_order(NOW, name="B", id=7)
    add_order(NOW, name="A", id=3)
    add_order(NOW, name="C", id=5)
    repo = OrderRepository(db_session)

    first = [order.id for order in repo.list_recent(NOW - timedelta(hours=1))]
    second = [order.id for order in repo.list_recent(NOW - timedelta(hours=1))]

    assert first == [3, 5, 7]
    assert first == second


def test_list_by_id_ignores_soft_deleted_order(db_session, add_order) -> None:
    live = add_order(NOW, name="Live")
    deleted = add_order(NOW, name="Deleted", is_deleted=True)
    repo = OrderRepository(db_session)

    assert [order.name for order in repo.list_by_id(live.id)] == ["Live"]
    assert repo.list_by_id(deleted.id) == []
    assert repo.list_by_id(999) == []


def test_list_after_is_strict(db_session, add_order) -> None:
    cutoff = datetime(2023, 12, 29)
    add_order(cutoff, name="At Cutoff")
    add_order(cutoff + timedelta(minutes=1), name="After Cutoff")
    add_order(cutoff - timedelta(minutes=1), name="Before Cutoff")
    add_order(cutoff + timedelta(days=1), name="Deleted", is_deleted=True)

    orders = OrderRepository(db_session).list_after(cutoff)

    assert [order.name for order in orders] == ["After Cutoff"]
