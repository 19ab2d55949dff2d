"""ProductResolver service - SRP compliance."""

import logging

from app.db.memory.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductResolver:
    """Checks products against the catalog (SRP: product lookup only)."""

    def __init__(self, product_repo: ProductRepository):
        """
        Initialize with SOLID dependencies (DIP).

        Args:
            product_repo: Repository for catalog products
        """
        self.product_repo = product_repo

    async def exists(self, product_id: str) -> bool:
        """
        Check whether a product is in the catalog.

        Repository errors are not caught here.

        Args:
            product_id: Catalog identifier

        Returns:
            bool: True if the product exists
        """
        product = await self.product_repo.get(product_id)
        if product is None:
            logger.debug(f"Product {product_id} not in catalog")
            return False
        return True
