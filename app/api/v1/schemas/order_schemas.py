"""
Modelos Pydantic para la API de pedidos y productos.

Los campos de texto ausentes toman el valor "" para que sea el validador
de pedidos, y no el esquema, quien produzca el rechazo de negocio.
"""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from app.domain.models import (
    CustomerDomain,
    LineItemDomain,
    OrderDomain,
    ProductDomain,
    ShippingAddressDomain,
)


class CustomerSchema(BaseModel):
    """Cliente del pedido."""

    first_name: str = ""
    last_name: str = ""


class ShippingAddressSchema(BaseModel):
    """Dirección de envío."""

    street_address: str = ""
    postal_code: str = ""
    city: str = ""
    country: str = ""


class LineItemSchema(BaseModel):
    """Línea de pedido."""

    product_id: str = ""
    quantity: int = 0


class OrderSchema(BaseModel):
    """Pedido, tanto candidato (entrada) como aceptado (salida)."""

    id: str = Field(default="", description="Identificador del pedido, elegido por el cliente")
    customer: CustomerSchema = Field(default_factory=CustomerSchema)
    shipping_address: ShippingAddressSchema = Field(default_factory=ShippingAddressSchema)
    line_items: List[LineItemSchema] = Field(default_factory=list)

    def to_domain(self) -> OrderDomain:
        """Convierte el esquema en un pedido de dominio."""
        return OrderDomain.from_dict(self.model_dump())

    @classmethod
    def from_domain(cls, order: OrderDomain) -> "OrderSchema":
        """Construye el esquema a partir de un pedido de dominio."""
        return cls.model_validate(order.to_dict())


class CreateOrderResponse(BaseModel):
    """Acuse de recibo vacío de un pedido aceptado."""


class ListOrdersResponse(BaseModel):
    """Todos los pedidos aceptados."""

    orders: List[OrderSchema] = Field(default_factory=list)


class ProductSchema(BaseModel):
    """Producto del catálogo."""

    id: str
    name: str
    price: Decimal
    currency: str = "EUR"

    @classmethod
    def from_domain(cls, product: ProductDomain) -> "ProductSchema":
        return cls.model_validate(product.to_dict())


class ListProductsResponse(BaseModel):
    """Catálogo completo."""

    products: List[ProductSchema] = Field(default_factory=list)
