"""
Data access for orders.

``OrderRepository`` is the only code that talks to the order store.
Every read excludes soft‑deleted rows and returns the newest orders
first; rows sharing an ``entry_date`` come back in ascending ``id``
order so repeated calls against the same data are deterministic.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Query, Session

from ..models.order import Order

logger = logging.getLogger(__name__)


class OrderRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def _live_orders(self) -> Query:
        return self._db.query(Order).filter(Order.is_deleted.is_(False))

    @staticmethod
    def _newest_first(query: Query) -> List[Order]:
        return query.order_by(Order.entry_date.desc(), Order.id.asc()).all()

    def add(self, order: Order) -> Order:
        """Insert ``order`` and return it with its identifier populated.

        The transaction is rolled back if the insert fails, leaving the
        store unchanged, and the original exception is re‑raised.
        """
        self._db.add(order)
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        self._db.refresh(order)
        logger.debug("Inserted order %s", order.id)
        return order

    def list_recent(self, since: datetime) -> List[Order]:
        return self._newest_first(self._live_orders().filter(Order.entry_date > since))

    def list_by_id(self, order_id: int) -> List[Order]:
        return self._newest_first(self._live_orders().filter(Order.id == order_id))

    def list_after(self, cutoff: datetime) -> List[Order]:
        return self._newest_first(self._live_orders().filter(Order.entry_date > cutoff))
