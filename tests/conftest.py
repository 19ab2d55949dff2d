"""Configuración compartida de pytest."""

import os

# Antes de importar la app: sin archivos de log y en entorno de testing
os.environ["LOG_FILE_PATH"] = ""
os.environ["ENVIRONMENT"] = "testing"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest  # noqa: E402

from app.domain.models import CustomerDomain, LineItemDomain, OrderDomain, ShippingAddressDomain  # noqa: E402


def _geocoding_body(name="20 Avenue de Segur", postcode="75007", city="Paris", score=0.97):
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": name, "postcode": postcode, "city": city, "score": score},
            }
        ],
    }


@pytest.fixture
def geocoding_body():
    """Fábrica de respuestas del geocodificador con un único candidato."""
    return _geocoding_body


@pytest.fixture
def candidate_order() -> OrderDomain:
    """Pedido válido con una dirección acentuada."""
    return OrderDomain(
        id="order-1",
        customer=CustomerDomain(first_name="Joe", last_name="John"),
        shipping_address=ShippingAddressDomain(
            street_address="20 avenue de Ségur",
            postal_code="75007",
            city="Paris",
            country="France",
        ),
        line_items=[LineItemDomain(product_id="PIPR-JACKET-SIZM", quantity=5)],
    )
