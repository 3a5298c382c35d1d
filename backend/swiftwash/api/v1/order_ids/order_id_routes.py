"""Order ID API endpoints."""

import structlog
from fastapi import APIRouter, HTTPException

from swiftwash.api.v1.order_ids.dependencies import AuditServiceDep, OrderIdServiceDep
from swiftwash.api.v1.order_ids.schemas import (
    GenerateOrderIdRequest,
    GenerateOrderIdResponse,
    OrderIdRecordResponse,
)
from swiftwash.services.audit.exceptions import OrderIdNotFound
from swiftwash.services.exceptions import PreconditionFailed
from swiftwash.services.order_ids.composer import OrderFlags, parse_order_id
from swiftwash.services.order_ids.exceptions import InvalidOrderId
from swiftwash.services.sequence.exceptions import AllocationFailed

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["order-ids"])


@router.post(
    "/order-ids",
    response_model=GenerateOrderIdResponse,
    status_code=201,
    operation_id="generateOrderId",
)
async def generate_order_id(
    request: GenerateOrderIdRequest,
    service: OrderIdServiceDep,
) -> GenerateOrderIdResponse:
    """Generate a smart order ID from the user's saved address."""
    flags = OrderFlags(
        is_urgent=request.is_urgent,
        is_referred=request.is_referred,
        is_student=request.is_student,
    )
    try:
        result = await service.generate(request.user_id, request.order_type, flags)
    except PreconditionFailed as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AllocationFailed as e:
        logger.error("Order ID generation failed", user_id=request.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to generate order ID")

    return GenerateOrderIdResponse.from_result(result)


@router.get("/order-ids/{order_id}", response_model=OrderIdRecordResponse, operation_id="getOrderId")
async def get_order_id(
    order_id: str,
    audit: AuditServiceDep,
) -> OrderIdRecordResponse:
    """Get the generation record of an order ID."""
    try:
        parse_order_id(order_id)
        entry = await audit.get(order_id)
    except InvalidOrderId as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OrderIdNotFound:
        raise HTTPException(status_code=404, detail="Order ID not found")

    return OrderIdRecordResponse.from_model(entry)
