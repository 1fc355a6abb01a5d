import threading
from typing import Dict, List, Optional

from app.interfaces.IOrderRepository import IOrderRepository
from app.domain.models import Order


class InMemoryOrderRepository(IOrderRepository):
    """Process-local order store.

    Every access goes through one lock and callers only ever receive deep
    copies, so a request thread can't observe a half-written order.
    Dicts keep insertion order, which is the listing order.
    """

    def __init__(self):
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    def save(self, order: Order) -> Order:
        with self._lock:
            if order.id in self._orders:
                raise KeyError(f"Order id already used: {order.id}")
            self._orders[order.id] = order.model_copy(deep=True)
        return order

    def get(self, order_id: str) -> Optional[Order]:
        with self._lock:
            order = self._orders.get(order_id)
            return order.model_copy(deep=True) if order else None

    def list_all(self) -> List[Order]:
        with self._lock:
            return [order.model_copy(deep=True) for order in self._orders.values()]

    def update_status(self, order_id: str, status: str, updated_at: str) -> Optional[Order]:
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return None
            order.status = status
            order.updated_at = updated_at
            return order.model_copy(deep=True)

    def __len__(self):
        with self._lock:
            return len(self._orders)
