import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.errors import DownstreamUnavailable
from app.domain.models import Product
from app.infrastructure.repositories.order_repository import InMemoryOrderRepository
from app.infrastructure.repositories.product_catalog import StaticProductCatalog
from app.interfaces.IOrderManagementClient import IOrderManagementClient
from app.main import create_app


class FakeOmsClient(IOrderManagementClient):
    """Stands in for the order-management system.

    `data` is returned as the OMS payload; when it is None every call
    raises DownstreamUnavailable, like an unreachable OMS.
    """

    def __init__(self, data=None):
        self.data = data
        self.calls = []

    def fetch_status(self, order_id):
        self.calls.append(order_id)
        if self.data is None:
            raise DownstreamUnavailable("connection refused")
        return dict(self.data)


@pytest.fixture()
def catalog():
    return StaticProductCatalog(
        [
            Product(id="prod-001", name="Classic Cotton T-Shirt", price=10.00, category="apparel"),
            Product(id="prod-002", name="Guitar Pick", price=0.10),
            Product(id="prod-003", name="Sticker Pack", price=5.00),
            Product(id="prod-004", name="Ceramic Mug", price=19.99),
        ]
    )


@pytest.fixture()
def order_repo():
    return InMemoryOrderRepository()


@pytest.fixture()
def oms_client():
    return FakeOmsClient()


@pytest.fixture()
def settings():
    return Settings(ENVIRONMENT="test", OMS_URL="http://oms.test")


@pytest.fixture()
def app(settings, catalog, order_repo, oms_client):
    return create_app(settings=settings, catalog=catalog, order_repo=order_repo, oms_client=oms_client)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def customer():
    return {"name": "Ada Lovelace", "email": "ada@example.com"}
