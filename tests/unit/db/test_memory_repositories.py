"""Tests unitarios para los repositorios en memoria."""

import asyncio
import json

import pytest

from app.db.memory import OrderRepository, ProductRepository
from app.domain.models import OrderDomain, ProductDomain
from app.domain.value_objects import Money
from app.utils.error_handler import AppException, ErrorCode


class TestOrderRepository:
    """Tests para OrderRepository."""

    @pytest.mark.asyncio
    async def test_upsert_then_get(self, candidate_order):
        repo = OrderRepository()

        await repo.upsert(candidate_order)

        stored = await repo.get("order-1")
        assert stored == candidate_order
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        assert await OrderRepository().get("nope") is None

    @pytest.mark.asyncio
    async def test_upsert_same_id_last_write_wins(self, candidate_order):
        repo = OrderRepository()
        await repo.upsert(candidate_order)

        candidate_order.shipping_address.city = "Lyon"
        await repo.upsert(candidate_order)

        orders = await repo.list()
        assert len(orders) == 1
        assert orders[0].shipping_address.city == "Lyon"

    @pytest.mark.asyncio
    async def test_stored_order_is_a_copy(self, candidate_order):
        """Mutar el pedido después de guardarlo no cambia el repositorio."""
        repo = OrderRepository()
        await repo.upsert(candidate_order)

        candidate_order.customer.first_name = "Changed"

        stored = await repo.get("order-1")
        assert stored.customer.first_name == "Joe"

    @pytest.mark.asyncio
    async def test_concurrent_upserts_keep_every_order(self):
        repo = OrderRepository()

        await asyncio.gather(*(repo.upsert(OrderDomain(id=f"order-{i}")) for i in range(20)))

        assert await repo.count() == 20


class TestProductRepository:
    """Tests para ProductRepository."""

    @pytest.mark.asyncio
    async def test_default_catalog_is_seeded(self):
        repo = ProductRepository()

        product = await repo.get("PIPR-JACKET-SIZM")

        assert product is not None
        assert product.price == Money.from_string("89.00")
        assert await repo.count() == 5

    @pytest.mark.asyncio
    async def test_unknown_product_returns_none(self):
        assert await ProductRepository().get("UNKNOWN") is None

    @pytest.mark.asyncio
    async def test_custom_products(self):
        repo = ProductRepository([ProductDomain(id="X-1", name="Thing", price=Money.from_string("1.00"))])

        assert [p.id for p in await repo.list()] == ["X-1"]

    @pytest.mark.asyncio
    async def test_from_json_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps([{"id": "CAT-1", "name": "Cap", "price": "15.5", "currency": "EUR"}]),
            encoding="utf-8",
        )

        repo = ProductRepository.from_json_file(str(path))

        product = await repo.get("CAT-1")
        assert product.name == "Cap"
        assert str(product.price) == "EUR 15.50"

    def test_from_json_file_missing_raises_configuration_error(self, tmp_path):
        with pytest.raises(AppException) as exc_info:
            ProductRepository.from_json_file(str(tmp_path / "missing.json"))

        assert exc_info.value.error_code == ErrorCode.CONFIGURATION_ERROR

    def test_from_json_file_invalid_entry_raises(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"name": "no id"}]), encoding="utf-8")

        with pytest.raises(AppException):
            ProductRepository.from_json_file(str(path))

    def test_from_json_file_bad_price_raises_configuration_error(self, tmp_path):
        """Un precio no numérico se reporta como error de configuración."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"id": "X", "name": "n", "price": "abc"}]), encoding="utf-8")

        with pytest.raises(AppException) as exc_info:
            ProductRepository.from_json_file(str(path))

        assert exc_info.value.error_code == ErrorCode.CONFIGURATION_ERROR
