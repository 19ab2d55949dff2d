"""Tests de integración de la API HTTP de pedidos y productos."""

import pytest
from fastapi.testclient import TestClient

from app.api.v1.endpoints.orders import get_geocoding_client
from app.main import create_application
from app.utils.error_handler import AddressLookupException


class FakeGeocoder:
    """Geocodificador en memoria que registra las búsquedas recibidas."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.calls = []

    async def search(self, query, city, postcode):
        self.calls.append((query, city, postcode))
        if self.error:
            raise self.error
        return self.body


@pytest.fixture
def geocoder(geocoding_body):
    return FakeGeocoder(body=geocoding_body())


@pytest.fixture
def client(geocoder):
    app = create_application()
    app.dependency_overrides[get_geocoding_client] = lambda: geocoder
    with TestClient(app) as test_client:
        yield test_client


def order_payload(**overrides):
    payload = {
        "id": "order-1",
        "customer": {"first_name": "Joe", "last_name": "John"},
        "shipping_address": {
            "street_address": "20 avenue de Ségur",
            "postal_code": "75007",
            "city": "Paris",
            "country": "France",
        },
        "line_items": [{"product_id": "PIPR-JACKET-SIZM", "quantity": 5}],
    }
    payload.update(overrides)
    return payload


class TestCreateOrder:
    """Tests para POST /api/v1/orders."""

    def test_create_order_success(self, client, geocoder):
        response = client.post("/api/v1/orders", json=order_payload())

        assert response.status_code == 200
        assert response.json() == {}
        assert geocoder.calls == [("20 avenue de Segur", "Paris", "75007")]

        orders = client.get("/api/v1/orders").json()["orders"]
        assert orders == [
            {
                "id": "order-1",
                "customer": {"first_name": "Joe", "last_name": "John"},
                "shipping_address": {
                    "street_address": "20 Avenue de Segur",
                    "postal_code": "75007",
                    "city": "Paris",
                    "country": "France",
                },
                "line_items": [{"product_id": "PIPR-JACKET-SIZM", "quantity": 5}],
            }
        ]

    def test_unknown_product_rejected(self, client, geocoder):
        response = client.post(
            "/api/v1/orders",
            json=order_payload(line_items=[{"product_id": "UNKNOWN", "quantity": 5}]),
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "PRODUCT_NOT_FOUND"
        assert body["message"] == "product (UNKNOWN) not found"
        assert body["field"] == "line_items.product_id"
        assert geocoder.calls == []
        assert client.get("/api/v1/orders").json() == {"orders": []}

    def test_missing_customer_rejected_by_pipeline(self, client):
        payload = order_payload()
        del payload["customer"]

        response = client.post("/api/v1/orders", json=payload)

        assert response.status_code == 422
        assert response.json()["error_code"] == "INCOMPLETE_CUSTOMER"

    def test_unsupported_country(self, client, geocoder):
        payload = order_payload()
        payload["shipping_address"]["country"] = "Spain"

        response = client.post("/api/v1/orders", json=payload)

        assert response.status_code == 422
        assert response.json()["message"] == "send in France only"
        assert geocoder.calls == []

    def test_address_not_found(self, client, geocoder):
        geocoder.body = {"features": []}

        response = client.post("/api/v1/orders", json=order_payload())

        assert response.status_code == 422
        assert response.json()["error_code"] == "ADDRESS_NOT_FOUND"
        assert client.get("/api/v1/orders").json() == {"orders": []}

    def test_geocoder_failure_returns_502(self, client, geocoder):
        geocoder.error = AddressLookupException("HTTP 503 from geocoding service", api_response_code=503)

        response = client.post("/api/v1/orders", json=order_payload())

        assert response.status_code == 502
        body = response.json()
        assert body["error_code"] == "GEOCODING_API_ERROR"
        assert body["geocoding_response_code"] == 503

    def test_malformed_body_rejected_by_schema(self, client):
        response = client.post("/api/v1/orders", json={"line_items": "nope"})

        assert response.status_code == 422
        assert response.json()["error_type"] == "request_validation_error"


class TestProducts:
    """Tests para los endpoints de catálogo."""

    def test_list_products(self, client):
        products = client.get("/api/v1/products").json()["products"]

        assert {p["id"] for p in products} >= {"PIPR-JACKET-SIZM", "PIPR-MOSPAD-0000"}

    def test_fetch_product(self, client):
        response = client.get("/api/v1/products/PIPR-MOSPAD-0000")

        assert response.status_code == 200
        assert response.json()["name"] == "Mouse Pad"

    def test_fetch_unknown_product_returns_404(self, client):
        response = client.get("/api/v1/products/UNKNOWN")

        assert response.status_code == 404
        assert response.json()["error_type"] == "http_error"


class TestRootEndpoints:
    """Tests para los endpoints raíz."""

    def test_ping(self, client):
        assert client.get("/ping").json()["message"] == "pong"

    def test_version(self, client):
        assert "python_version" in client.get("/version").json()

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_request_id_header_is_echoed(self, client):
        response = client.get("/ping", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestUnhandledErrors:
    """Tests para errores no controlados dentro de un endpoint."""

    @pytest.fixture
    def failing_client(self):
        app = create_application()

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        with TestClient(app) as test_client:
            yield test_client

    def test_unhandled_error_returns_500_with_request_id(self, failing_client):
        response = failing_client.get("/boom", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        body = response.json()
        assert body["error_type"] == "internal_server_error"
        assert body["request_id"] == "req-500"
        assert response.headers["X-Request-ID"] == "req-500"
        assert "X-Process-Time" in response.headers

    def test_generated_request_id_matches_body(self, failing_client):
        response = failing_client.get("/boom")

        assert response.status_code == 500
        assert response.json()["request_id"] == response.headers["X-Request-ID"]
