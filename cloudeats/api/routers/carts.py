# cloudeats/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Request

from cloudeats.api.routers import Int64Path
from cloudeats.domain.errors import NotFound, StoreFailure
from cloudeats.domain.schemas import CartClearedOut, CartItemIn, CartOut, QuantityIn
from cloudeats.services.cart_service import CartService, empty_cart

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(request: Request) -> CartService:
    return CartService(request.app.state.cache)


@router.get("/{user_id}", response_model=CartOut)
def get_cart(user_id: Int64Path, svc: CartService = Depends(get_service)):
    try:
        return svc.get_cart(user_id)
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to get cart")


@router.post("/{user_id}/items", response_model=CartOut)
def add_item(user_id: Int64Path, payload: CartItemIn, svc: CartService = Depends(get_service)):
    try:
        return svc.add_item(
            user_id=user_id,
            item_id=payload.item_id,
            item_name=payload.item_name,
            price=payload.price,
            quantity=payload.quantity,
        )
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to add item to cart")


@router.put("/{user_id}/items/{item_id}", response_model=CartOut)
def update_item(
    user_id: Int64Path,
    item_id: Int64Path,
    payload: QuantityIn,
    svc: CartService = Depends(get_service),
):
    try:
        return svc.update_item_quantity(user_id, item_id, payload.quantity)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to update cart")


@router.delete("/{user_id}", response_model=CartClearedOut)
def clear_cart(user_id: Int64Path, svc: CartService = Depends(get_service)):
    try:
        svc.clear_cart(user_id)
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Failed to clear cart")
    return {"message": "Cart cleared", **empty_cart()}
