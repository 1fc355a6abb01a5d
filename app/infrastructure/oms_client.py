import logging
from typing import Any, Dict

import requests

from app.domain.errors import DownstreamUnavailable
from app.interfaces.IOrderManagementClient import IOrderManagementClient

logger = logging.getLogger(__name__)


class HttpOrderManagementClient(IOrderManagementClient):
    """Talks to the downstream order-management system over plain JSON/HTTP."""

    def __init__(self, base_url: str, timeout: float = 3.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_status(self, order_id: str) -> Dict[str, Any]:
        url = f"{self.base_url}/api/orders/{order_id}"
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DownstreamUnavailable(f"GET {url} failed: {e}") from e

        if not response.ok:
            raise DownstreamUnavailable(f"GET {url} returned {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise DownstreamUnavailable(f"GET {url} returned invalid JSON") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not data or not isinstance(data, dict):
            raise DownstreamUnavailable(f"GET {url} returned no order data")

        logger.debug(f"OMS status for {order_id}: {data.get('status')}")
        return data
