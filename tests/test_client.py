"""Tests for the requests-based collection client."""

from unittest.mock import MagicMock

import pytest
import requests

from collection_services.app.core.config import SERVICES, UnknownServiceError
from collection_services.client import CollectionClient


def _response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.content = text.encode() or (b"x" if payload is not None else b"")
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


def test_create_posts_to_create_path(session):
    session.request.return_value = _response(201, {"email": "ann@example.com"})
    client = CollectionClient("http://localhost:3000/", "users", session=session)

    record, error = client.create({"email": "ann@example.com"})

    assert record == {"email": "ann@example.com"}
    assert error is None
    session.request.assert_called_once_with(
        method="POST",
        url="http://localhost:3000/register",
        json={"email": "ann@example.com"},
        timeout=15,
    )


def test_list_gets_list_path(session):
    session.request.return_value = _response(200, [{"name": "pen"}])
    client = CollectionClient("http://localhost:3001", SERVICES["products"], session=session)

    records, error = client.list()

    assert records == [{"name": "pen"}]
    assert error is None
    assert session.request.call_args.kwargs["url"] == "http://localhost:3001/products"
    assert session.request.call_args.kwargs["method"] == "GET"


def test_http_error_uses_detail(session):
    session.request.return_value = _response(422, {"detail": "JSON decode error"})
    client = CollectionClient("http://localhost:3002", "orders", session=session)

    record, error = client.create({"product": "pen"})

    assert record is None
    assert error == {"status_code": 422, "message": "JSON decode error"}


def test_http_error_with_plain_text_body(session):
    session.request.return_value = _response(500, ValueError("no json"), text="Internal Server Error")
    client = CollectionClient("http://localhost:3002", "orders", session=session)

    records, error = client.list()

    assert records == []
    assert error == {"status_code": 500, "message": "Internal Server Error"}


def test_connection_error(session):
    session.request.side_effect = requests.ConnectionError("refused")
    client = CollectionClient("http://localhost:3001", "products", session=session)

    records, error = client.list()

    assert records == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_unknown_service_name():
    with pytest.raises(UnknownServiceError):
        CollectionClient("http://localhost:3003", "carts")


@pytest.mark.parametrize("payload", [{"items": []}, None])
def test_list_with_non_array_body_is_an_error(session, payload):
    session.request.return_value = _response(200, payload)
    client = CollectionClient("http://localhost:3001", "products", session=session)

    records, error = client.list()

    assert records == []
    assert error["status_code"] is None
    assert "unexpected response" in error["message"]


def test_list_of_empty_collection_is_not_an_error(session):
    session.request.return_value = _response(200, [])
    client = CollectionClient("http://localhost:3001", "products", session=session)

    assert client.list() == ([], None)
