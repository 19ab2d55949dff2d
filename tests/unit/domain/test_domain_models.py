"""Tests unitarios para modelos de dominio y value objects."""

from decimal import Decimal

import pytest

from app.domain.models import CustomerDomain, OrderDomain, ProductDomain, ShippingAddressDomain
from app.domain.value_objects import Money, ResolvedAddress


class TestMoney:
    """Tests para Money."""

    def test_amount_is_quantized(self):
        assert Money.from_string("12.5").amount == Decimal("12.50")

    def test_float_amount_converted(self):
        assert Money(amount=45.9).amount == Decimal("45.90")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            Money.from_string("-1")

    def test_invalid_currency_rejected(self):
        with pytest.raises(ValueError):
            Money.from_string("1", currency="EURO")

    def test_str(self):
        assert str(Money.from_string("89")) == "EUR 89.00"


class TestResolvedAddress:
    """Tests para ResolvedAddress.from_feature."""

    def test_from_feature(self):
        feature = {"properties": {"name": "20 Avenue de Segur", "postcode": "75007", "city": "Paris", "score": 0.9}}

        resolved = ResolvedAddress.from_feature(feature)

        assert resolved.canonical_label == "20 Avenue de Segur"
        assert resolved.canonical_postal_code == "75007"
        assert resolved.canonical_city == "Paris"
        assert resolved.score == 0.9

    def test_score_is_optional(self):
        resolved = ResolvedAddress.from_feature({"properties": {"name": "A", "postcode": "1", "city": "B"}})
        assert resolved.score is None

    def test_null_property_rejected(self):
        with pytest.raises(TypeError):
            ResolvedAddress.from_feature({"properties": {"name": "A", "postcode": None, "city": "B"}})


class TestOrderDomain:
    """Tests para OrderDomain y sus partes."""

    def test_from_dict_defaults_missing_fields(self):
        order = OrderDomain.from_dict({"id": "o-1"})

        assert order.customer == CustomerDomain()
        assert order.shipping_address == ShippingAddressDomain()
        assert order.line_items == []

    def test_round_trip(self, candidate_order):
        assert OrderDomain.from_dict(candidate_order.to_dict()) == candidate_order

    def test_totals(self, candidate_order):
        assert candidate_order.items_count == 1
        assert candidate_order.total_quantity == 5

    def test_apply_resolution_keeps_country(self):
        address = ShippingAddressDomain("20 avenue de Ségur", "75007", "Paris", "France")

        address.apply_resolution(ResolvedAddress("20 Avenue de Segur", "75007", "Paris"))

        assert address.street_address == "20 Avenue de Segur"
        assert address.country == "France"


class TestProductDomain:
    """Tests para ProductDomain."""

    def test_id_required(self):
        with pytest.raises(ValueError):
            ProductDomain(id="", name="x", price=Money.from_string("1"))

    def test_from_dict(self):
        product = ProductDomain.from_dict({"id": "P-1", "name": "Cap", "price": 9.9})

        assert product.price == Money.from_string("9.90")
        assert product.to_dict() == {"id": "P-1", "name": "Cap", "price": Decimal("9.90"), "currency": "EUR"}
