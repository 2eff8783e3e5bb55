# cloudeats/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from cloudeats.api.routers import Int64Path
from cloudeats.domain.errors import InvalidInput, NotFound, StoreFailure
from cloudeats.domain.schemas import (
    OrderCreate,
    OrderOut,
    OrderPlacedOut,
    StatusUpdate,
    StatusUpdatedOut,
)
from cloudeats.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_service(request: Request) -> OrderService:
    return OrderService(request.app.state.cache, request.app.state.orders)


@router.post("", response_model=OrderPlacedOut, status_code=201)
def place_order(payload: OrderCreate, svc: OrderService = Depends(get_service)):
    """
    Places an order from the user's cart and clears the cart.
    """
    try:
        order = svc.place_order(
            user_id=payload.user_id,
            delivery_address=payload.delivery_address,
            notes=payload.notes,
            payment_method=payload.payment_method,
        )
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to place order")

    return {
        "message": "Order placed successfully",
        "orderId": order["_id"],
        "order": order,
    }


@router.get("/user/{user_id}", response_model=List[OrderOut])
def get_user_orders(user_id: Int64Path, svc: OrderService = Depends(get_service)):
    try:
        return svc.get_orders_for_user(user_id)
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to get orders")


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, svc: OrderService = Depends(get_service)):
    try:
        return svc.get_order(order_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to get order")


@router.put("/{order_id}/status", response_model=StatusUpdatedOut)
def update_status(order_id: str, payload: StatusUpdate, svc: OrderService = Depends(get_service)):
    try:
        svc.update_order_status(order_id, payload.status)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to update order status")

    return {"message": "Order status updated", "status": payload.status}
