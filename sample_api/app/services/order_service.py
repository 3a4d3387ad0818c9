"""
Business logic for orders.

``OrderService`` implements the four order operations on top of an
``OrderRepository``:

* recent orders, entered during the last 24 hours;
* orders matching an identifier;
* creation of a new order after validating its name and description;
* orders entered after the cutoff reached by walking back a number of
  business days (see ``core.business_days``).

Each method returns a ``ServiceResult``.  Store exceptions are logged
here, once, with their traceback and handed back as
``InternalFailure`` so nothing internal leaks to API clients.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional

from ..core.business_days import business_days_cutoff
from ..models.order import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH, Order
from ..repositories.order_repository import OrderRepository
from ..schemas.order import OrderCreate
from .results import InternalFailure, InvalidInput, Ok, ServiceResult

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(hours=24)

INVALID_ORDER_MESSAGE = "Invalid order name or description."
NEGATIVE_DAYS_MESSAGE = "Number of business days must not be negative."
DAYS_OUT_OF_RANGE_MESSAGE = "Number of business days is out of range."


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching stored entry dates."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_valid_text(value: Optional[str], max_length: int) -> bool:
    return bool(value and value.strip()) and len(value) <= max_length


class OrderService:
    def __init__(self, repository: OrderRepository, clock: Callable[[], datetime] = utc_now) -> None:
        self._repository = repository
        self._clock = clock

    def get_recent_orders(self) -> ServiceResult:
        since = self._clock() - RECENT_WINDOW
        try:
            return Ok(self._repository.list_recent(since))
        except Exception as exc:
            logger.exception("Error occurred while fetching recent orders.")
            return InternalFailure(exc)

    def get_order_by_id(self, order_id: int) -> ServiceResult:
        """Return the live orders carrying ``order_id``.

        The value is a list even though identifiers are unique in the
        store, so callers treat "nothing found" the same way for every
        read operation.
        """
        try:
            return Ok(self._repository.list_by_id(order_id))
        except Exception as exc:
            logger.exception("Error occurred while fetching order %s.", order_id)
            return InternalFailure(exc)

    def create_order(self, data: OrderCreate) -> ServiceResult:
        """Validate ``data`` and insert it as a new order.

        Name and description must each contain a non‑blank character and
        be at most 100 characters long; otherwise ``InvalidInput`` is
        returned without touching the store.  The order is stored exactly
        as submitted, including its ``entry_date``.
        """
        if not (
            is_valid_text(data.name, NAME_MAX_LENGTH)
            and is_valid_text(data.description, DESCRIPTION_MAX_LENGTH)
        ):
            logger.info("Rejected order with invalid name or description")
            return InvalidInput(INVALID_ORDER_MESSAGE)

        order = Order(**data.model_dump())
        try:
            created = self._repository.add(order)
        except Exception as exc:
            logger.exception("Error occurred while submitting an order.")
            return InternalFailure(exc)
        logger.info("Created order %s (%s)", created.id, created.name)
        return Ok(created)

    def get_orders_after_business_days(self, days: int, reference_date: Optional[date] = None) -> ServiceResult:
        """Return live orders entered after the business‑day cutoff.

        The cutoff is ``days`` business days before ``reference_date``
        (today, by the service clock, when omitted).  Orders are
        included when their ``entry_date`` is later than midnight at the
        start of the cutoff day.  A negative ``days``, or one reaching back
        past the first day of the calendar, is ``InvalidInput``.
        """
        if days < 0:
            return InvalidInput(NEGATIVE_DAYS_MESSAGE)
        if reference_date is None:
            reference_date = self._clock().date()

        try:
            cutoff_day = business_days_cutoff(days, reference_date)
        except ValueError:
            logger.info("Rejected business-day query: %s day(s) before %s", days, reference_date)
            return InvalidInput(DAYS_OUT_OF_RANGE_MESSAGE)
        cutoff = datetime.combine(cutoff_day, time.min)
        logger.debug("Business-day cutoff for %s day(s) before %s is %s", days, reference_date, cutoff)
        try:
            return Ok(self._repository.list_after(cutoff))
        except Exception as exc:
            logger.exception("Error occurred while fetching orders.")
            return InternalFailure(exc)
