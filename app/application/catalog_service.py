from typing import List, Tuple

from app.domain.errors import NotFoundError
from app.domain.models import Product
from app.interfaces.IProductCatalog import IProductCatalog


class CatalogService:
    def __init__(self, catalog: IProductCatalog):
        self.catalog = catalog

    def list_products(self) -> Tuple[List[Product], int]:
        products = self.catalog.all()
        return products, len(products)

    def get_product(self, product_id: str) -> Product:
        product = self.catalog.find(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product
