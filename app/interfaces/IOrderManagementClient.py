from abc import ABC, abstractmethod
from typing import Any, Dict


class IOrderManagementClient(ABC):
    @abstractmethod
    def fetch_status(self, order_id: str) -> Dict[str, Any]:
        """Return the OMS `data` object for an order.

        Raises DownstreamUnavailable when there is nothing usable.
        """
        pass
