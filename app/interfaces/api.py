import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.domain.errors import InternalError, ServiceError, ValidationError
from app.domain.models import utc_now_iso

router = APIRouter()
logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# HEALTH
# ---------------------------------------------------------
@router.get("/health")
def health(request: Request):
    return {
        "status": "healthy",
        "service": request.app.state.settings.SERVICE_NAME,
        "timestamp": utc_now_iso(),
    }


# ---------------------------------------------------------
# PRODUCTS
# ---------------------------------------------------------
@router.get("/api/products")
def list_products(request: Request):
    products, total = request.app.state.catalog_service.list_products()
    return {
        "success": True,
        "data": [product.to_dict() for product in products],
        "total": total,
    }


@router.get("/api/products/{product_id}")
def get_product(product_id: str, request: Request):
    product = request.app.state.catalog_service.get_product(product_id)
    return {"success": True, "data": product.to_dict()}


# ---------------------------------------------------------
# ORDERS
# ---------------------------------------------------------
@router.post("/api/orders/create", status_code=201)
async def create_order(request: Request):
    """
    Reads the raw JSON body. OrderService owns the validation order
    and the error messages.
    """
    try:
        payload = await request.json()
    except ValueError:
        # JSONDecodeError, UnicodeDecodeError and over-long integer literals
        raise ValidationError("Invalid JSON body")

    try:
        order = request.app.state.order_service.create_order(payload)
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"❌ Error creating order: {e}", exc_info=True)
        raise InternalError("Internal server error")

    return JSONResponse(
        status_code=201,
        content={
            "success": True,
            "message": "Order created successfully",
            "data": order.to_dict(),
        },
    )


@router.get("/api/orders")
def list_orders(request: Request):
    orders, total = request.app.state.order_service.list_orders()
    return {
        "success": True,
        "data": [order.to_dict() for order in orders],
        "total": total,
    }


# Must stay sync: FastAPI runs it in the threadpool while the OMS call blocks.
@router.get("/api/orders/{order_id}")
def get_order(order_id: str, request: Request):
    order = request.app.state.order_service.get_order(order_id)
    return {"success": True, "data": order.to_dict()}
