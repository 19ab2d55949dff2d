"""
Product catalog API Endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.api.v1.schemas.order_schemas import ListProductsResponse, ProductSchema
from app.db.memory import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_repository(request: Request) -> ProductRepository:
    """Dependency para obtener el catálogo de productos."""
    return request.app.state.product_repository


@router.get("", response_model=ListProductsResponse)
async def list_products(product_repo: ProductRepository = Depends(get_product_repository)):
    """Lista el catálogo completo."""
    products = await product_repo.list()
    return ListProductsResponse(products=[ProductSchema.from_domain(product) for product in products])


@router.get("/{product_id}", response_model=ProductSchema)
async def fetch_product(product_id: str, product_repo: ProductRepository = Depends(get_product_repository)):
    """
    Obtiene un producto del catálogo.

    Raises:
        HTTPException: 404 si el producto no existe
    """
    product = await product_repo.get(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"product ({product_id}) not found",
        )
    return ProductSchema.from_domain(product)
