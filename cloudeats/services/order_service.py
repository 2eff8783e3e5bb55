# cloudeats/services/order_service.py
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

import redis
from bson import ObjectId
from pymongo.collection import Collection

from cloudeats.domain.errors import EmptyCart, InvalidInput, NotFound
from cloudeats.repos.cart_repo import CartRepo
from cloudeats.repos.order_repo import OrderRepo
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


VALID_STATUSES = frozenset(s.value for s in OrderStatus)


def _parse_order_id(order_id: str) -> ObjectId:
    if not ObjectId.is_valid(order_id):
        raise NotFound("Order not found")
    return ObjectId(order_id)


class OrderService:
    """
    Orders live in MongoDB, the cart they come from lives in Redis.
    Checkout is two independent writes: insert the order, then drop the cart.
    """

    def __init__(self, cache: redis.Redis, orders: Collection):
        self.cart_repo = CartRepo(cache)
        self.repo = OrderRepo(orders)

    def place_order(
        self,
        user_id: int,
        delivery_address: str,
        notes: str | None = None,
        payment_method: str | None = None,
    ) -> Dict[str, Any]:
        """
        Use case: checkout.

        1. validates user id and delivery address
        2. takes a snapshot of the cart
        3. inserts the order (status pending)
        4. deletes the cart, only after the insert went through
        """
        if not user_id or not delivery_address:
            raise InvalidInput("User ID and delivery address are required")

        cart = self.cart_repo.get_cart(user_id)

        if not cart or not cart.get("items"):
            raise EmptyCart()

        now = datetime.now(timezone.utc)
        order = {
            "userId": int(user_id),
            "items": cart["items"],
            "totalAmount": cart["total"],
            "deliveryAddress": delivery_address,
            "notes": notes or "",
            "paymentMethod": payment_method or "cash",
            "status": OrderStatus.PENDING.value,
            "createdAt": now,
            "updatedAt": now,
        }

        order_id = self.repo.create_order(order)
        order["_id"] = order_id

        #if this fails the order is already stored, no rollback
        self.cart_repo.delete_cart(user_id)

        logger.info(f"Order {order_id} placed by user {user_id}, total {order['totalAmount']}")

        return order

    def get_orders_for_user(self, user_id: int) -> List[Dict[str, Any]]:
        return self.repo.get_orders_by_user(user_id)

    def get_order(self, order_id: str) -> Dict[str, Any]:
        order = self.repo.get_order(_parse_order_id(order_id))

        if not order:
            raise NotFound("Order not found")

        return order

    def update_order_status(self, order_id: str, status: str) -> None:
        """Any status may follow any other, there is no transition graph."""
        if status not in VALID_STATUSES:
            raise InvalidInput("Invalid status")

        matched = self.repo.update_order_status(
            _parse_order_id(order_id),
            status,
            datetime.now(timezone.utc),
        )

        if not matched:
            raise NotFound("Order not found")

        logger.info(f"Order {order_id} status set to {status}")
