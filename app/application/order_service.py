import logging
import uuid
from typing import Any, List, Tuple

from app.domain.errors import DownstreamUnavailable, NotFoundError, ValidationError
from app.domain.models import STATUS_PENDING, Customer, Order, OrderItem, utc_now_iso
from app.interfaces.IOrderManagementClient import IOrderManagementClient
from app.interfaces.IOrderRepository import IOrderRepository
from app.interfaces.IProductCatalog import IProductCatalog

logger = logging.getLogger(__name__)

# Per line item; keeps subtotals finite when serialized as JSON numbers
MAX_QUANTITY = 1_000_000


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; `true` is not a quantity
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value <= MAX_QUANTITY


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _optional_str(value: Any):
    return value if _non_empty_str(value) else None


class OrderService:
    """Order intake: validation, server-side pricing, storage and status refresh."""

    def __init__(
        self,
        catalog: IProductCatalog,
        order_repo: IOrderRepository,
        oms_client: IOrderManagementClient,
        currency: str = "USD",
    ):
        self.catalog = catalog
        self.order_repo = order_repo
        self.oms_client = oms_client
        self.currency = currency

    # --- CREATE ---

    def create_order(self, payload: Any) -> Order:
        """Validate a raw request body and store a new pending order.

        Checks run in a fixed order and stop at the first failure:
        items, customer, then each item's product and quantity.
        """
        if not isinstance(payload, dict):
            raise ValidationError("Invalid JSON body")

        items = payload.get("items")
        customer = payload.get("customer")

        if not isinstance(items, list) or not items:
            raise ValidationError("Items array is required and cannot be empty")

        if (
            not isinstance(customer, dict)
            or not _non_empty_str(customer.get("name"))
            or not _non_empty_str(customer.get("email"))
        ):
            raise ValidationError("Customer information (name, email) is required")

        order_items = self._price_items(items)

        now = utc_now_iso()
        order = Order(
            id=str(uuid.uuid4()),
            items=order_items,
            customer=Customer(
                name=customer["name"],
                email=customer["email"],
                address=_optional_str(customer.get("address")),
                phone=_optional_str(customer.get("phone")),
            ),
            total_amount=Order.total_of(order_items),
            currency=self.currency,
            status=STATUS_PENDING,
            created_at=now,
            updated_at=now,
        )
        self.order_repo.save(order)
        logger.info(f"✅ Order {order.id} created: {len(order_items)} items, total {order.total_amount} {order.currency}")
        logger.debug(f"Order payload: {order.to_dict()}")
        return order

    def _price_items(self, items: List[Any]) -> List[OrderItem]:
        order_items = []
        for item in items:
            item = item if isinstance(item, dict) else {}
            product_id = item.get("productId")

            product = self.catalog.find(product_id) if isinstance(product_id, str) else None
            if product is None:
                raise ValidationError(f"Product not found: {product_id}")

            quantity = item.get("quantity")
            if not _is_positive_int(quantity):
                raise ValidationError(f"Invalid quantity for product: {product_id}")

            order_items.append(OrderItem.priced_from(product, quantity))
        return order_items

    # --- READ ---

    def get_order(self, order_id: str) -> Order:
        """Return an order, refreshing its status from the OMS when it answers."""
        order = self.order_repo.get(order_id)
        if order is None:
            raise NotFoundError("Order not found")

        # No lock is held here, the store only locks inside its own calls
        try:
            remote = self.oms_client.fetch_status(order_id)
        except DownstreamUnavailable as e:
            logger.warning(f"⚠️ Could not reach OMS for status update of {order_id}: {e}")
            return order

        status = remote.get("status") or order.status
        updated_at = remote.get("updatedAt") or order.updated_at
        if status == order.status and updated_at == order.updated_at:
            return order

        refreshed = self.order_repo.update_status(order_id, str(status), str(updated_at))
        return refreshed if refreshed is not None else order

    def list_orders(self) -> Tuple[List[Order], int]:
        orders = self.order_repo.list_all()
        return orders, len(orders)
