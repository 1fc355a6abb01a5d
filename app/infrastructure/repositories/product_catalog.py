import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.interfaces.IProductCatalog import IProductCatalog
from app.domain.models import Product

logger = logging.getLogger(__name__)


class StaticProductCatalog(IProductCatalog):
    """Read-only catalog held in memory for the life of the process."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: List[Product] = list(products)

    @classmethod
    def from_json_file(cls, path: Path) -> "StaticProductCatalog":
        """Load the bundled catalog. A missing or broken file gives an empty catalog."""
        try:
            with open(path, encoding="utf-8") as fh:
                records = json.load(fh)
            if not isinstance(records, list):
                raise ValueError("catalog file must contain a JSON array")
            products = [Product.model_validate(record) for record in records]
        except (OSError, ValueError, PydanticValidationError) as e:
            logger.error(f"❌ Error loading products from {path}: {e}")
            return cls()

        logger.info(f"📦 Loaded {len(products)} products from {path}")
        return cls(products)

    def all(self) -> List[Product]:
        return list(self._products)

    def find(self, product_id: str) -> Optional[Product]:
        # Small static list, a scan is fine
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def __len__(self):
        return len(self._products)
