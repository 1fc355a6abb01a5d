from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

STATUS_PENDING = "pending"


def utc_now_iso() -> str:
    """UTC timestamp like 2024-05-01T12:30:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def round_money(value) -> float:
    """Round half-up to cents. Going through str() keeps 1.005 from becoming 1.00."""
    value = Decimal(str(value))
    with localcontext() as ctx:
        # quantize needs every integer digit plus the two cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class CamelModel(BaseModel):
    # Wire format is camelCase, python attributes stay snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class Product(BaseModel):
    # Catalog records carry arbitrary extra fields (category, image, ...)
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    name: str
    price: float = Field(ge=0)

    def to_dict(self) -> dict:
        return self.model_dump()


class Customer(CamelModel):
    name: str
    email: str
    address: Optional[str] = None
    phone: Optional[str] = None


class OrderItem(CamelModel):
    product_id: str
    name: str
    price: float
    quantity: int
    unit_price: float
    subtotal: float

    @classmethod
    def priced_from(cls, product: Product, quantity: int) -> "OrderItem":
        """Build a line item using the catalog price, never the client's."""
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            unit_price=product.price,
            subtotal=round_money(Decimal(str(product.price)) * quantity),
        )


class Order(CamelModel):
    id: str
    items: List[OrderItem]
    customer: Customer
    total_amount: float
    currency: str
    status: str = STATUS_PENDING
    created_at: str
    updated_at: str

    @staticmethod
    def total_of(items: List[OrderItem]) -> float:
        return round_money(sum((Decimal(str(item.subtotal)) for item in items), Decimal("0")))
