from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models import Product


class IProductCatalog(ABC):
    @abstractmethod
    def all(self) -> List[Product]:
        pass

    @abstractmethod
    def find(self, product_id: str) -> Optional[Product]:
        pass
