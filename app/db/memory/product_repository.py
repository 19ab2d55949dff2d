"""
ProductRepository: in-memory product catalog.

The catalog is seeded at startup, either from the built-in list or from a
JSON file (``PRODUCT_CATALOG_PATH``) holding a list of
``{"id", "name", "price", "currency"}`` objects.
"""

import json
import logging
from decimal import InvalidOperation
from pathlib import Path
from typing import Iterable, List, Optional

from app.db.memory.base import BaseMemoryRepository, log_operation
from app.domain.models import ProductDomain
from app.domain.value_objects import Money
from app.utils.error_handler import AppException, ErrorCode

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = [
    ProductDomain(id="PIPR-JACKET-SIZM", name="Jacket - Size M", price=Money.from_string("89.00")),
    ProductDomain(id="PIPR-JACKET-SIZL", name="Jacket - Size L", price=Money.from_string("89.00")),
    ProductDomain(id="PIPR-MOSPAD-0000", name="Mouse Pad", price=Money.from_string("12.50")),
    ProductDomain(id="PIPR-JOGCAS-SIZL", name="Jogging Pants - Size L", price=Money.from_string("45.90")),
    ProductDomain(id="PIPR-SMALLBAG-000", name="Small Bag", price=Money.from_string("29.90")),
]


class ProductRepository(BaseMemoryRepository[ProductDomain]):
    """Read-mostly repository for catalog products, keyed by product id."""

    def __init__(self, products: Optional[Iterable[ProductDomain]] = None):
        """
        Initialize the catalog.

        Args:
            products: Initial products. Defaults to the built-in catalog.
        """
        super().__init__()
        for product in DEFAULT_CATALOG if products is None else products:
            self._items[product.id] = product

    @classmethod
    def from_json_file(cls, path: str) -> "ProductRepository":
        """
        Build a catalog from a JSON file.

        Args:
            path: Path to a JSON list of product objects

        Returns:
            ProductRepository: Seeded repository

        Raises:
            AppException: If the file cannot be read or parsed
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
            products = [ProductDomain.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError, InvalidOperation) as e:
            raise AppException(
                message=f"Cannot load product catalog from {path}: {e}",
                error_code=ErrorCode.CONFIGURATION_ERROR,
            ) from e

        logger.info(f"Loaded {len(products)} products from {path}")
        return cls(products)

    @log_operation()
    async def get(self, product_id: str) -> Optional[ProductDomain]:
        """Get a product by id, or None when it does not exist."""
        return await self._get(product_id)

    async def list(self) -> List[ProductDomain]:
        """All catalog products."""
        return await self._list()

    async def upsert(self, product: ProductDomain) -> None:
        """Insert or overwrite a catalog product."""
        await self._upsert(product.id, product)
