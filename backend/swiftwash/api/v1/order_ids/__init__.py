"""Order ID API package.

- order_id_routes: Generate order IDs and look up their audit records
- geo_routes: City table listing and ad-hoc address resolution
"""

from fastapi import APIRouter

from swiftwash.api.v1.order_ids.geo_routes import router as geo_router
from swiftwash.api.v1.order_ids.order_id_routes import router as order_id_router

# Create a combined router for all order ID endpoints
router = APIRouter()

router.include_router(order_id_router)
router.include_router(geo_router)

__all__ = ["router"]
