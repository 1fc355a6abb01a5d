from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models import Order


class IOrderRepository(ABC):
    @abstractmethod
    def save(self, order: Order) -> Order:
        pass

    @abstractmethod
    def get(self, order_id: str) -> Optional[Order]:
        pass

    @abstractmethod
    def list_all(self) -> List[Order]:
        pass

    @abstractmethod
    def update_status(self, order_id: str, status: str, updated_at: str) -> Optional[Order]:
        pass
