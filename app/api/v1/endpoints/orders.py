"""
Order API Endpoints.

CreateOrder validates and stores a candidate order; ListOrders returns
every accepted order.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from app.api.v1.schemas.order_schemas import CreateOrderResponse, ListOrdersResponse, OrderSchema
from app.db.memory import OrderRepository, ProductRepository
from app.services.orders.factories import create_orchestrator
from app.services.orders.interfaces import IGeocodingClient
from app.services.orders.orchestrator import OrderCreationOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Orders"])


def get_order_repository(request: Request) -> OrderRepository:
    """Dependency para obtener el repositorio de pedidos."""
    return request.app.state.order_repository


def get_product_repository(request: Request) -> ProductRepository:
    """Dependency para obtener el catálogo de productos."""
    return request.app.state.product_repository


def get_geocoding_client(request: Request) -> IGeocodingClient:
    """Dependency para obtener el cliente de geocodificación compartido."""
    return request.app.state.geocoding_client


def get_order_orchestrator(
    order_repo: OrderRepository = Depends(get_order_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
    geocoding_client: IGeocodingClient = Depends(get_geocoding_client),
) -> OrderCreationOrchestrator:
    """Dependency para obtener el orquestador de creación de pedidos."""
    return create_orchestrator(
        order_repo=order_repo,
        product_repo=product_repo,
        geocoding_client=geocoding_client,
    )


@router.post("", response_model=CreateOrderResponse, status_code=status.HTTP_200_OK)
async def create_order(
    order: OrderSchema,
    orchestrator: OrderCreationOrchestrator = Depends(get_order_orchestrator),
):
    """
    Valida y registra un pedido.

    El pedido se rechaza si el cliente está incompleto, si algún producto no
    existe, si el destino no es Francia o si la dirección no se puede
    resolver. Si se acepta, se guarda con la dirección canónica.

    Returns:
        Objeto vacío
    """
    await orchestrator.create_order(order.to_domain())
    return CreateOrderResponse()


@router.get("", response_model=ListOrdersResponse)
async def list_orders(orchestrator: OrderCreationOrchestrator = Depends(get_order_orchestrator)):
    """
    Lista todos los pedidos aceptados, sin filtros ni paginación.
    """
    orders = await orchestrator.list_orders()
    return ListOrdersResponse(orders=[OrderSchema.from_domain(order) for order in orders])
