"""
Order endpoints for API v1.

These routes expose the order service over HTTP.  Service outcomes
map to responses as follows:

* ``Ok`` with data → 200 (201 for creation);
* ``Ok`` with an empty list → 404 with an operation specific message;
* ``InvalidInput`` → 400 with the validation message;
* ``InternalFailure`` → 500 with a generic message.  The cause has
  already been logged by the service and is never sent to the client.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status
from sqlalchemy.orm import Session

from sample_api.app.core.db import get_db
from sample_api.app.repositories.order_repository import OrderRepository
from sample_api.app.schemas.order import OrderCreate, OrderRead
from sample_api.app.services.order_service import OrderService
from sample_api.app.services.results import InternalFailure, InvalidInput, ServiceResult

INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request."

router = APIRouter()


async def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(OrderRepository(db))


def _unwrap(result: ServiceResult):
    """Return the value of an ``Ok`` result or raise the matching HTTP error."""
    if isinstance(result, InvalidInput):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
    if isinstance(result, InternalFailure):
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_MESSAGE)
    return result.value


def _order_list(result: ServiceResult, not_found: str) -> List[OrderRead]:
    orders = _unwrap(result)
    if not orders:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
    return [OrderRead.model_validate(order) for order in orders]


@router.get(
    "/recent",
    response_model=List[OrderRead],
    responses={404: {"description": "No recent orders found"}, 500: {"description": "Server error"}},
)
async def get_recent_orders(service: OrderService = Depends(get_order_service)) -> List[OrderRead]:
    """Return orders entered during the last 24 hours, newest first."""
    return _order_list(service.get_recent_orders(), "No recent orders found.")


@router.get(
    "/specificOrder",
    response_model=List[OrderRead],
    responses={404: {"description": "No order found"}, 500: {"description": "Server error"}},
)
async def get_order_by_id(
    order_id: int = Query(..., alias="id"),
    service: OrderService = Depends(get_order_service),
) -> List[OrderRead]:
    """Return the order with the given ``id`` wrapped in a list.

    Soft‑deleted orders are treated as missing.
    """
    return _order_list(service.get_order_by_id(order_id), "No order found.")


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid input"}, 500: {"description": "Server error"}},
)
async def create_order(
    order: OrderCreate,
    request: Request,
    response: Response,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    """Create an order.

    The body is stored as sent, ``entryDate`` included.  The
    ``Location`` header points at the recent orders listing, where the
    new order shows up if its entry date falls in the last day.
    """
    created = _unwrap(service.create_order(order))
    response.headers["Location"] = str(request.url_for("get_recent_orders"))
    return OrderRead.model_validate(created)


@router.get(
    "/ordersBasedOnNumberOfWorkingDays/{days}",
    response_model=List[OrderRead],
    responses={
        400: {"description": "Negative or out of range number of days"},
        404: {"description": "No orders found"},
        500: {"description": "Server error"},
    },
)
async def get_orders_after_business_days(
    days: int = Path(..., description="Number of business days to look back"),
    reference_date: Optional[date] = Query(None, description="Day to count back from; defaults to today (UTC)"),
    service: OrderService = Depends(get_order_service),
) -> List[OrderRead]:
    """Return orders entered within the last ``days`` business days.

    Weekends, January 1 and December 25 are not business days.
    """
    return _order_list(service.get_orders_after_business_days(days, reference_date), "No orders found.")
