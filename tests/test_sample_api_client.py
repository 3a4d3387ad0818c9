"""Tests for SampleAPIClient using a mocked requests session."""

import json
from datetime import date, datetime
from unittest.mock import MagicMock

import requests

from sample_api_client import SampleAPIClient

BASE_URL = "http://orders.local"


def _response(status_code: int, payload=None) -> requests.Response:
    """Helper: build a requests.Response carrying a JSON payload."""
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    response._content = json.dumps(payload).encode() if payload is not None else b""
    return response


def _client(*responses) -> tuple[SampleAPIClient, MagicMock]:
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return SampleAPIClient(base_url=f"{BASE_URL}/", session=session), session


def test_get_recent_orders() -> None:
    orders = [{"id": 1, "name": "Order1"}, {"id": 2, "name": "Order2"}]
    client, session = _client(_response(200, orders))

    data, error = client.get_recent_orders()

    assert data == orders
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == f"{BASE_URL}/api/v1/orders/recent"


def test_get_order_sends_id_as_query_parameter() -> None:
    client, session = _client(_response(200, [{"id": 7}]))

    data, error = client.get_order(7)

    assert data == [{"id": 7}]
    assert session.request.call_args.kwargs["params"] == {"id": 7}


def test_not_found_is_reported_with_server_message() -> None:
    client, _ = _client(_response(404, {"detail": "No order found."}))

    data, error = client.get_order(10)

    assert data == []
    assert error == {"status_code": 404, "message": "No order found."}


def test_create_order_serializes_dates() -> None:
    created = {"id": 3, "entryDate": "2024-01-08T09:30:00", "name": "Chairs", "description": "Twelve"}
    client, session = _client(_response(201, created))

    data, error = client.create_order(
        {"entryDate": datetime(2024, 1, 8, 9, 30), "name": "Chairs", "description": "Twelve"}
    )

    assert data == created
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == f"{BASE_URL}/api/v1/orders"
    assert kwargs["json"]["entryDate"] == "2024-01-08T09:30:00"


def test_create_order_bad_request() -> None:
    client, _ = _client(_response(400, {"detail": "Invalid order name or description."}))

    data, error = client.create_order({"entryDate": "2024-01-08T09:30:00", "name": "", "description": ""})

    assert data is None
    assert error == {"status_code": 400, "message": "Invalid order name or description."}


def test_orders_after_business_days_passes_reference_date() -> None:
    client, session = _client(_response(200, []))

    client.get_orders_after_business_days(5, reference_date=date(2024, 1, 8))

    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == f"{BASE_URL}/api/v1/orders/ordersBasedOnNumberOfWorkingDays/5"
    assert kwargs["params"] == {"reference_date": "2024-01-08"}


def test_transport_error_is_reported() -> None:
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("connection refused")
    client = SampleAPIClient(base_url=BASE_URL, session=session)

    data, error = client.get_recent_orders()

    assert data == []
    assert error == {"status_code": None, "message": "connection refused"}
