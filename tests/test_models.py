from decimal import Decimal

from app.domain.models import Order, OrderItem, Product, round_money, utc_now_iso


class TestMoney:
    def test_rounds_half_up(self):
        assert round_money(1.005) == 1.01
        assert round_money(2.675) == 2.68
        assert round_money(0.1 + 0.2) == 0.3

    def test_rounds_values_wider_than_default_precision(self):
        assert round_money(Decimal(10**27) * Decimal("10.00")) == 1e28

    def test_line_item_uses_catalog_price(self):
        item = OrderItem.priced_from(Product(id="p", name="P", price=0.1), 3)
        assert item.subtotal == 0.3
        assert item.unit_price == item.price == 0.1

    def test_total_of(self):
        items = [
            OrderItem.priced_from(Product(id="a", name="A", price=19.99), 3),
            OrderItem.priced_from(Product(id="b", name="B", price=0.1), 1),
        ]
        assert Order.total_of(items) == 60.07


def test_timestamp_format():
    stamp = utc_now_iso()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2024-01-01T00:00:00.000Z")
