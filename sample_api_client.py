"""Sample Orders API client.

A thin wrapper around the orders REST API built on ``requests``.  Each
high‑level method mirrors one route:

* :meth:`SampleAPIClient.get_recent_orders` – orders entered in the last 24 hours.
* :meth:`SampleAPIClient.get_order` – the order with a given identifier.
* :meth:`SampleAPIClient.create_order` – submit a new order.
* :meth:`SampleAPIClient.get_orders_after_business_days` – orders entered
  within the last N business days.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary with
the keys ``status_code`` and ``message``.  A 404 from a listing route is
reported as an error like any other, so callers can show the server's
"No orders found." message as is.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class SampleAPIClient:
    """Client for the orders endpoints of the Sample Orders API."""

    ORDERS_PATH = "/api/v1/orders"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url`.
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Order operations
    # ------------------------------------------------------------------
    def get_recent_orders(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the orders entered during the last 24 hours."""
        return self._list(f"{self.ORDERS_PATH}/recent")

    def get_order(self, order_id: int) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the order with identifier ``order_id``.

        The service answers with a list holding at most one order.
        """
        return self._list(f"{self.ORDERS_PATH}/specificOrder", params={"id": order_id})

    def create_order(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Submit a new order.

        Args:
            payload: Order fields, e.g. ``{"entryDate": ..., "name": ...,
                "description": ...}``.  ``datetime`` values are sent in ISO
                format.
        Returns:
            A tuple ``(order, error)`` where ``order`` is the created order
            as echoed by the service.
        """
        body = {
            key: value.isoformat() if isinstance(value, (date, datetime)) else value
            for key, value in payload.items()
        }
        return self._request("POST", self.ORDERS_PATH, json_body=body)

    def get_orders_after_business_days(
        self, days: int, reference_date: Optional[date] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve orders entered within the last ``days`` business days.

        Args:
            days: Number of business days to look back.
            reference_date: Day to count back from; the server uses its own
                current date when omitted.
        """
        params = {"reference_date": reference_date.isoformat()} if reference_date else None
        return self._list(f"{self.ORDERS_PATH}/ordersBasedOnNumberOfWorkingDays/{days}", params=params)
